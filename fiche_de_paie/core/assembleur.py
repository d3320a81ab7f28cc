"""Assemblage de la fiche de paie a partir d'une analyse.

Enchaine :
1. Verification des entrees (catalogue puis analyse)
2. Resolution des lignes nommees (brut, net, reductions...)
3. Extraction, normalisation, fusion et regroupement des cotisations
4. Calcul du total des cotisations
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from fiche_de_paie.config import constants as c
from fiche_de_paie.core.resultat import Erreur, Resultat, collecter
from fiche_de_paie.models.analyse import Analyse
from fiche_de_paie.models.catalogue import CatalogueRegles, LocalisateurRegles
from fiche_de_paie.models.fiche import FicheDePaie, MontantPartage
from fiche_de_paie.rules.extraction import extraire_variables
from fiche_de_paie.rules.fusion import fusionner
from fiche_de_paie.rules.montants import resoudre_montant
from fiche_de_paie.rules.normalisation import normaliser
from fiche_de_paie.rules.regroupement import regrouper_par_branche

logger = logging.getLogger("fiche_de_paie.assembleur")

# Champ de la fiche -> regle de l'analyse
LIGNES_NOMMEES = {
    "salaire_de_base": c.SALAIRE_DE_BASE,
    "avantages_en_nature": c.AVANTAGES_EN_NATURE,
    "salaire_brut": c.SALAIRE_BRUT,
    "cotisations_salariales": c.COTISATIONS_SALARIALES,
    "cotisations_patronales": c.COTISATIONS_PATRONALES,
    "reductions_de_cotisations": c.REDUCTIONS_DE_COTISATIONS,
    "salaire_charge": c.SALAIRE_CHARGE,
    "salaire_net": c.SALAIRE_NET,
    "salaire_net_imposable": c.SALAIRE_NET_IMPOSABLE,
    "salaire_net_a_payer": c.SALAIRE_NET_A_PAYER,
}


def construire_cotisations(analyse: Analyse, localisateur: LocalisateurRegles):
    """Cotisations de l'analyse, fusionnees et groupees par branche."""
    normalisees = collecter(
        normaliser(localisateur, variable) for variable in extraire_variables(analyse)
    )
    return normalisees.map(lambda cotisations: regrouper_par_branche(fusionner(cotisations)))


def construire_fiche_de_paie(
    analyse: Optional[Analyse], catalogue: Optional[CatalogueRegles]
) -> Resultat[FicheDePaie]:
    """Point d'entree : fiche de paie complete ou premiere erreur rencontree."""
    if catalogue is None:
        return Resultat.echec(Erreur.catalogue_manquant())
    if analyse is None:
        return Resultat.echec(Erreur.analyse_manquante())

    lignes = {}
    for champ, dotted_name in LIGNES_NOMMEES.items():
        resultat = resoudre_montant(analyse, catalogue, dotted_name)
        if not resultat.est_ok:
            logger.debug("Echec de resolution de %s : %s", dotted_name, resultat.erreur.message)
            return Resultat.echec(resultat.erreur)
        lignes[champ] = resultat.valeur

    cotisations = construire_cotisations(analyse, catalogue)
    if not cotisations.est_ok:
        return Resultat.echec(cotisations.erreur)

    total = MontantPartage(
        part_salariale=lignes["cotisations_salariales"].montant,
        part_patronale=(
            lignes["cotisations_patronales"].montant
            - lignes["reductions_de_cotisations"].montant
        ),
    )
    fiche = FicheDePaie(cotisations=cotisations.valeur, total_cotisations=total, **lignes)
    logger.debug(
        "Fiche de paie construite : %d cotisation(s), total %s / %s",
        fiche.nb_cotisations, total.part_salariale, total.part_patronale,
    )
    return Resultat.ok(fiche)


def construire_ou_lever(
    analyse: Optional[Analyse], catalogue: Optional[CatalogueRegles]
) -> FicheDePaie:
    """Comme ``construire_fiche_de_paie`` mais leve l'exception correspondante."""
    return construire_fiche_de_paie(analyse, catalogue).valeur_ou_lever()


def fiche_de_paie_depuis_etat(etat: Mapping[str, Any]) -> Resultat[FicheDePaie]:
    """Fiche de paie depuis l'etat applicatif (cles ``analysis`` et ``flatRules``).

    Les valeurs brutes (dict/list issus de JSON) sont validees au passage.
    """
    analyse = etat.get("analysis")
    catalogue = etat.get("flatRules")
    if analyse is not None and not isinstance(analyse, Analyse):
        analyse = Analyse.depuis_dict(analyse)
    if catalogue is not None and not isinstance(catalogue, CatalogueRegles):
        catalogue = CatalogueRegles.depuis_liste(catalogue)
    return construire_fiche_de_paie(analyse, catalogue)
