"""Acces par chemin dans l'arbre d'explication d'une analyse."""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Sequence

from pydantic import BaseModel


def _enfant(noeud: Any, cle: str) -> Any:
    if isinstance(noeud, Mapping):
        return noeud.get(cle)
    if isinstance(noeud, BaseModel):
        if cle in type(noeud).model_fields:
            return getattr(noeud, cle)
        return (noeud.model_extra or {}).get(cle)
    return None


def valeur_au_chemin(noeud: Any, chemin: Sequence[str]) -> Any:
    """Descend ``chemin`` depuis ``noeud`` ; None si une etape manque."""
    courant = noeud
    for cle in chemin:
        if courant is None:
            return None
        courant = _enfant(courant, cle)
    return courant


def premiere_valeur(noeud: Any, chemins: Iterable[Sequence[str]]) -> Optional[Any]:
    """Premiere valeur definie (non vide) parmi ``chemins``, dans l'ordre."""
    for chemin in chemins:
        valeur = valeur_au_chemin(noeud, chemin)
        if valeur:
            return valeur
    return None
