"""Modeles de donnees de la fiche de paie produite par le moteur."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from fiche_de_paie.config.constants import Branche


# --- Regles ---

@dataclass(frozen=True)
class Regle:
    """Regle localisee : libelle et lien vers sa documentation."""
    nom: str
    lien: str


@dataclass(frozen=True)
class RegleAvecMontant(Regle):
    """Une ligne nommee de la fiche (salaire brut, net a payer...)."""
    montant: Decimal = Decimal("0")


# --- Cotisations ---

@dataclass(frozen=True)
class MontantPartage:
    """Montant reparti entre part salariale et part patronale."""
    part_salariale: Decimal = Decimal("0")
    part_patronale: Decimal = Decimal("0")

    def __add__(self, autre: MontantPartage) -> MontantPartage:
        return MontantPartage(
            part_salariale=self.part_salariale + autre.part_salariale,
            part_patronale=self.part_patronale + autre.part_patronale,
        )

    @property
    def est_nul(self) -> bool:
        return self.part_salariale == 0 and self.part_patronale == 0


@dataclass(frozen=True)
class Cotisation(Regle):
    """Une ligne de cotisation sociale rattachee a une regle et une branche."""
    dotted_name: str = ""
    branche: Branche = Branche.AUTRES
    montant: MontantPartage = field(default_factory=MontantPartage)

    def fusionner(self, suivante: Cotisation) -> Cotisation:
        """Additionne les montants ; les autres champs viennent de ``suivante``."""
        return replace(suivante, montant=self.montant + suivante.montant)


def cotisation_vide(dotted_name: str = "") -> Cotisation:
    """Cotisation neutre pour la fusion (montants a zero)."""
    return Cotisation(nom="", lien="", dotted_name=dotted_name)


CotisationsParBranche = tuple[tuple[Branche, tuple[Cotisation, ...]], ...]


# --- Fiche de paie ---

@dataclass(frozen=True)
class FicheDePaie:
    """Fiche de paie complete, cotisations groupees par branche."""
    salaire_de_base: RegleAvecMontant
    avantages_en_nature: RegleAvecMontant
    salaire_brut: RegleAvecMontant
    cotisations_salariales: RegleAvecMontant
    cotisations_patronales: RegleAvecMontant
    reductions_de_cotisations: RegleAvecMontant
    cotisations: CotisationsParBranche
    total_cotisations: MontantPartage
    salaire_charge: RegleAvecMontant
    salaire_net: RegleAvecMontant
    salaire_net_imposable: RegleAvecMontant
    salaire_net_a_payer: RegleAvecMontant

    def cotisations_de(self, branche: Branche) -> tuple[Cotisation, ...]:
        """Cotisations d'une branche (vide si aucune)."""
        for b, cotisations in self.cotisations:
            if b == branche:
                return cotisations
        return ()

    @property
    def nb_cotisations(self) -> int:
        return sum(len(cotisations) for _, cotisations in self.cotisations)
