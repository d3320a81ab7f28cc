"""Normalisation d'une variable de cotisation en ``Cotisation``.

Le debiteur (``dû par``) et la branche sont lus via des chemins de repli
essayes dans l'ordre de ``CHEMINS_DU_PAR`` / ``CHEMINS_BRANCHE`` ; la
premiere valeur definie l'emporte.
"""

import logging
from typing import Optional

from fiche_de_paie.config.constants import (
    Branche,
    CHEMINS_BRANCHE,
    CHEMINS_DU_PAR,
    DEBITEURS_SALARIE,
)
from fiche_de_paie.core.resultat import Resultat
from fiche_de_paie.models.analyse import NoeudEvalue
from fiche_de_paie.models.catalogue import LocalisateurRegles
from fiche_de_paie.models.fiche import Cotisation, MontantPartage
from fiche_de_paie.utils.chemins import premiere_valeur
from fiche_de_paie.utils.number_utils import en_montant

logger = logging.getLogger("fiche_de_paie.normalisation")


def du_par(variable: NoeudEvalue) -> Optional[str]:
    """Debiteur de la cotisation ('salarié', 'employeur') ou None."""
    return premiere_valeur(variable, CHEMINS_DU_PAR)


def branche_de(variable: NoeudEvalue) -> Branche:
    """Branche de la cotisation, ``autres`` si aucune n'est renseignee."""
    valeur = premiere_valeur(variable, CHEMINS_BRANCHE)
    if valeur is None:
        return Branche.AUTRES
    try:
        return Branche(valeur)
    except ValueError:
        # Valeur hors des sept branches : rangee dans "autres", jamais ecartee
        logger.warning(
            "Branche inconnue '%s' pour %s, classee dans '%s'",
            valeur, variable.dotted_name, Branche.AUTRES.value,
        )
        return Branche.AUTRES


def montant_partage(variable: NoeudEvalue) -> MontantPartage:
    """Attribue la valeur de la variable a la part salariale ou patronale."""
    montant = en_montant(variable.node_value)
    if du_par(variable) in DEBITEURS_SALARIE:
        return MontantPartage(part_salariale=montant)
    return MontantPartage(part_patronale=montant)


def normaliser(
    localisateur: LocalisateurRegles, variable: NoeudEvalue
) -> Resultat[Cotisation]:
    """Convertit une variable brute en cotisation a une seule part renseignee."""
    dotted_name = variable.dotted_name or ""
    return localisateur.localiser(dotted_name).map(
        lambda regle: Cotisation(
            nom=regle.nom,
            lien=regle.lien,
            dotted_name=dotted_name,
            branche=branche_de(variable),
            montant=montant_partage(variable),
        )
    )
