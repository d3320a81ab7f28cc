"""Catalogue des regles (flat rules) et localisation des libelles."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from fiche_de_paie.config.constants import PREFIXE_LIEN_REGLE
from fiche_de_paie.core.exceptions import ParseError
from fiche_de_paie.core.resultat import Erreur, Resultat
from fiche_de_paie.models.fiche import Regle
from fiche_de_paie.utils.noms import dernier_segment, encoder_nom_regle

logger = logging.getLogger("fiche_de_paie.catalogue")


class RegleCatalogue(BaseModel):
    """Une regle du catalogue."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    dotted_name: str = Field(alias="dottedName")
    nom: Optional[str] = None
    titre: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def nom_par_defaut(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not data.get("nom"):
            dotted_name = data.get("dottedName", data.get("dotted_name"))
            if isinstance(dotted_name, str):
                return {**data, "nom": dernier_segment(dotted_name)}
        return data

    @property
    def libelle(self) -> str:
        return self.titre or self.nom


class LocalisateurRegles(Protocol):
    """Capacite de localisation d'une regle."""

    def localiser(self, dotted_name: str) -> Resultat[Regle]:
        ...


_ADAPTATEUR_REGLES = TypeAdapter(list[RegleCatalogue])


class CatalogueRegles:
    """Catalogue indexe par dotted name."""

    def __init__(self, regles: Iterable[RegleCatalogue] = ()):
        self.regles = list(regles)
        self._index = {regle.dotted_name: regle for regle in self.regles}

    @classmethod
    def depuis_liste(cls, data: Any) -> CatalogueRegles:
        """Valide un catalogue issu de JSON (liste de regles)."""
        try:
            regles = _ADAPTATEUR_REGLES.validate_python(data)
        except ValidationError as e:
            raise ParseError(f"Catalogue de regles invalide : {e}") from e
        return cls(regles)

    def __len__(self) -> int:
        return len(self.regles)

    def __contains__(self, dotted_name: str) -> bool:
        return dotted_name in self._index

    def trouver(self, dotted_name: str) -> Optional[RegleCatalogue]:
        return self._index.get(dotted_name)

    def localiser(self, dotted_name: str) -> Resultat[Regle]:
        """Libelle et lien de la regle ``dotted_name``."""
        regle = self.trouver(dotted_name)
        if regle is None:
            logger.debug("Regle absente du catalogue : %s", dotted_name)
            return Resultat.echec(Erreur.regle_introuvable(dotted_name))
        return Resultat.ok(Regle(
            nom=regle.libelle,
            lien=PREFIXE_LIEN_REGLE + encoder_nom_regle(dotted_name),
        ))
