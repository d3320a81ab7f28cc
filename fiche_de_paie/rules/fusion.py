"""Fusion des cotisations portant sur la meme regle."""

import logging
from functools import reduce
from typing import Iterable

from fiche_de_paie.models.fiche import Cotisation, cotisation_vide

logger = logging.getLogger("fiche_de_paie.fusion")


def fusionner(cotisations: Iterable[Cotisation]) -> list[Cotisation]:
    """Une cotisation par dotted name, sans les cotisations nulles.

    Les groupes gardent l'ordre de premiere apparition. Dans un groupe, les
    montants s'additionnent part par part ; libelle, lien et branche sont
    ceux du dernier element rencontre.
    """
    groupes: dict[str, list[Cotisation]] = {}
    for cotisation in cotisations:
        groupes.setdefault(cotisation.dotted_name, []).append(cotisation)

    fusionnees = [
        reduce(Cotisation.fusionner, groupe, cotisation_vide(dotted_name))
        for dotted_name, groupe in groupes.items()
    ]
    non_nulles = [c for c in fusionnees if not c.montant.est_nul]
    logger.debug(
        "%d cotisation(s) apres fusion, %d ecartee(s) car nulle(s)",
        len(non_nulles), len(fusionnees) - len(non_nulles),
    )
    return non_nulles
