"""Canal d'erreur par valeur de retour entre les composants du moteur.

Chaque etape (localisation, resolution des montants, normalisation...)
renvoie un ``Resultat`` au lieu de lever une exception. L'assembleur
s'arrete au premier echec ; ``valeur_ou_lever`` convertit l'erreur en
exception pour les appelants qui preferent ce style (CLI, tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

from fiche_de_paie.core.exceptions import (
    AnalyseManquanteError,
    CatalogueManquantError,
    FicheDePaieError,
    RegleIntrouvableDansAnalyseError,
    RegleIntrouvableError,
)

T = TypeVar("T")
U = TypeVar("U")


class TypeErreur(str, Enum):
    """Types d'erreurs remontes par le moteur."""
    CATALOGUE_MANQUANT = "catalogue_manquant"
    REGLE_INTROUVABLE = "regle_introuvable"
    ANALYSE_MANQUANTE = "analyse_manquante"
    REGLE_INTROUVABLE_DANS_ANALYSE = "regle_introuvable_dans_analyse"


@dataclass(frozen=True)
class Erreur:
    """Une erreur terminale pour l'appel en cours."""
    type: TypeErreur
    message: str
    dotted_name: Optional[str] = None

    @classmethod
    def catalogue_manquant(cls) -> "Erreur":
        return cls(
            TypeErreur.CATALOGUE_MANQUANT,
            "Le catalogue de regles ne doit pas etre None",
        )

    @classmethod
    def regle_introuvable(cls, dotted_name: str) -> "Erreur":
        return cls(
            TypeErreur.REGLE_INTROUVABLE,
            f"Impossible de trouver la regle \"{dotted_name}\" dans le catalogue. "
            "Verifier l'orthographe et l'ecriture sous forme dottedName",
            dotted_name,
        )

    @classmethod
    def analyse_manquante(cls) -> "Erreur":
        return cls(
            TypeErreur.ANALYSE_MANQUANTE,
            "L'analyse fournie ne doit pas etre None",
        )

    @classmethod
    def regle_introuvable_dans_analyse(cls, dotted_name: str) -> "Erreur":
        return cls(
            TypeErreur.REGLE_INTROUVABLE_DANS_ANALYSE,
            f"Impossible de trouver la regle \"{dotted_name}\" dans l'analyse. "
            "Verifier l'orthographe et l'ecriture sous forme dottedName",
            dotted_name,
        )

    def vers_exception(self) -> FicheDePaieError:
        """Construit l'exception correspondant a ce type d'erreur."""
        if self.type == TypeErreur.CATALOGUE_MANQUANT:
            return CatalogueManquantError(self.message)
        if self.type == TypeErreur.ANALYSE_MANQUANTE:
            return AnalyseManquanteError(self.message)
        if self.type == TypeErreur.REGLE_INTROUVABLE:
            return RegleIntrouvableError(self.message, self.dotted_name or "")
        return RegleIntrouvableDansAnalyseError(self.message, self.dotted_name or "")


@dataclass(frozen=True)
class Resultat(Generic[T]):
    """Valeur calculee ou erreur, jamais les deux."""
    valeur: Optional[T] = None
    erreur: Optional[Erreur] = None

    @classmethod
    def ok(cls, valeur: T) -> "Resultat[T]":
        return cls(valeur=valeur)

    @classmethod
    def echec(cls, erreur: Erreur) -> "Resultat[T]":
        return cls(erreur=erreur)

    @property
    def est_ok(self) -> bool:
        return self.erreur is None

    def map(self, fonction: Callable[[T], U]) -> "Resultat[U]":
        """Applique ``fonction`` a la valeur si le resultat est un succes."""
        if self.erreur is not None:
            return Resultat.echec(self.erreur)
        return Resultat.ok(fonction(self.valeur))

    def valeur_ou_lever(self) -> T:
        """Retourne la valeur ou leve l'exception associee a l'erreur."""
        if self.erreur is not None:
            raise self.erreur.vers_exception()
        return self.valeur


def collecter(resultats: Iterable[Resultat[T]]) -> Resultat[list[T]]:
    """Rassemble une suite de resultats, en s'arretant au premier echec."""
    valeurs: list[T] = []
    for resultat in resultats:
        if not resultat.est_ok:
            return Resultat.echec(resultat.erreur)
        valeurs.append(resultat.valeur)
    return Resultat.ok(valeurs)
