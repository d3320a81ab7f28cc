"""Modeles Pydantic de l'analyse fournie par le moteur d'evaluation.

L'analyse est en lecture seule : un cache ``dotted name -> noeud evalue``
et la liste des cibles demandees. Seuls les champs utilises par la fiche
de paie sont declares ; le reste (``cotisation``, ``taxe``, ``titre``...)
est conserve tel quel.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator,
)

from fiche_de_paie.config.constants import AGREGATS_COTISATIONS, CHEMIN_VARIABLES_COTISATION
from fiche_de_paie.core.exceptions import ParseError
from fiche_de_paie.utils.chemins import valeur_au_chemin


class NoeudEvalue(BaseModel):
    """Un noeud evalue : valeur numerique finie et explication optionnelle."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    dotted_name: Optional[str] = Field(default=None, alias="dottedName")
    node_value: Union[Decimal, bool, None] = Field(default=None, alias="nodeValue")
    explanation: Any = None

    @field_validator("node_value", mode="before")
    @classmethod
    def nombre_en_decimal(cls, valeur: Any) -> Any:
        if isinstance(valeur, (int, float)) and not isinstance(valeur, bool):
            return Decimal(str(valeur))
        return valeur


def variables_de_cotisation(agregat: Any) -> list[Any]:
    """Entrees brutes listees sous un agregat de cotisations (vide si absent)."""
    enfants = valeur_au_chemin(agregat, CHEMIN_VARIABLES_COTISATION)
    if not isinstance(enfants, (list, tuple)):
        return []
    return [enfant for enfant in enfants if isinstance(enfant, (Mapping, NoeudEvalue))]


class Analyse(BaseModel):
    """Resultat d'evaluation : cache des noeuds et cibles."""

    model_config = ConfigDict(frozen=True)

    cache: dict[str, NoeudEvalue] = Field(default_factory=dict)
    targets: list[NoeudEvalue] = Field(default_factory=list)

    @model_validator(mode="after")
    def valider_variables_de_cotisation(self) -> Analyse:
        # Les variables sous les agregats obeissent aux memes regles que les noeuds du cache
        for agregat in AGREGATS_COTISATIONS:
            for variable in variables_de_cotisation(self.cache.get(agregat)):
                try:
                    NoeudEvalue.model_validate(variable)
                except ValidationError as e:
                    raise ValueError(
                        f"Variable de cotisation invalide sous '{agregat}' : {e}"
                    ) from e
        return self

    @classmethod
    def depuis_dict(cls, data: Any) -> Analyse:
        """Valide une analyse issue de JSON."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Analyse invalide : {e}") from e

    def trouver_noeud(self, dotted_name: str) -> Optional[NoeudEvalue]:
        """Cherche dans le cache, puis dans les cibles."""
        noeud = self.cache.get(dotted_name)
        if noeud is not None:
            return noeud
        for cible in self.targets:
            if cible.dotted_name == dotted_name:
                return cible
        return None
