"""Regroupement des cotisations par branche, dans l'ordre fixe des branches."""

from typing import Iterable

from fiche_de_paie.config.constants import Branche, ORDRE_BRANCHES
from fiche_de_paie.models.fiche import Cotisation, CotisationsParBranche


def regrouper_par_branche(cotisations: Iterable[Cotisation]) -> CotisationsParBranche:
    """Exactement une entree par branche, meme vide."""
    par_branche: dict[Branche, list[Cotisation]] = {b: [] for b in ORDRE_BRANCHES}
    for cotisation in cotisations:
        par_branche[cotisation.branche].append(cotisation)
    return tuple((b, tuple(par_branche[b])) for b in ORDRE_BRANCHES)
