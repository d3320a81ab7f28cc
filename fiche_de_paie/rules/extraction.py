"""Extraction des variables de cotisation depuis l'analyse."""

import logging

from fiche_de_paie.config.constants import AGREGATS_COTISATIONS
from fiche_de_paie.models.analyse import Analyse, NoeudEvalue, variables_de_cotisation

logger = logging.getLogger("fiche_de_paie.extraction")


def extraire_variables(analyse: Analyse) -> list[NoeudEvalue]:
    """Variables sous les agregats salarial puis patronal, dans cet ordre.

    Un agregat absent ou sans explication ne contribue aucune variable.
    Les variables ont deja ete validees avec l'analyse.
    """
    variables: list[NoeudEvalue] = []
    for agregat in AGREGATS_COTISATIONS:
        enfants = variables_de_cotisation(analyse.cache.get(agregat))
        if not enfants:
            logger.debug("Aucune variable de cotisation sous %s", agregat)
            continue
        variables.extend(NoeudEvalue.model_validate(enfant) for enfant in enfants)
    logger.debug("%d variable(s) de cotisation extraite(s)", len(variables))
    return variables
