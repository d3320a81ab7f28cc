"""Export JSON de la fiche de paie.

Conserve les noms de champs, l'ordre fixe des branches et la precision
des montants (serialises en chaines, sans arrondi).
"""

import json
from pathlib import Path
from typing import Any

from fiche_de_paie.config.settings import ExportConfig
from fiche_de_paie.core.exceptions import ExportError
from fiche_de_paie.models.fiche import (
    Cotisation, FicheDePaie, MontantPartage, RegleAvecMontant,
)
from fiche_de_paie.core.assembleur import LIGNES_NOMMEES


class PayslipReportGenerator:
    """Genere la representation JSON d'une fiche de paie."""

    def __init__(self, config: ExportConfig | None = None):
        self.config = config or ExportConfig()

    def generer_json(self, fiche: FicheDePaie, chemin_sortie: Path) -> Path:
        """Ecrit la fiche au format JSON."""
        data = self.construire_json(fiche)
        try:
            chemin_sortie.parent.mkdir(parents=True, exist_ok=True)
            with open(chemin_sortie, "w", encoding="utf-8") as f:
                json.dump(
                    data, f,
                    ensure_ascii=self.config.ensure_ascii,
                    indent=self.config.indent_json,
                )
        except OSError as e:
            raise ExportError(f"Impossible d'ecrire {chemin_sortie} : {e}") from e
        return chemin_sortie

    def construire_json(self, fiche: FicheDePaie) -> dict[str, Any]:
        """Construit la structure JSON de la fiche."""
        data: dict[str, Any] = {
            champ: self._ligne(getattr(fiche, champ)) for champ in LIGNES_NOMMEES
        }
        data["cotisations"] = [
            [branche.value, [self._cotisation(c) for c in cotisations]]
            for branche, cotisations in fiche.cotisations
        ]
        data["total_cotisations"] = self._montant_partage(fiche.total_cotisations)
        return data

    def _ligne(self, ligne: RegleAvecMontant) -> dict[str, str]:
        return {"nom": ligne.nom, "lien": ligne.lien, "montant": str(ligne.montant)}

    def _montant_partage(self, montant: MontantPartage) -> dict[str, str]:
        return {
            "part_salariale": str(montant.part_salariale),
            "part_patronale": str(montant.part_patronale),
        }

    def _cotisation(self, cotisation: Cotisation) -> dict[str, Any]:
        return {
            "nom": cotisation.nom,
            "lien": cotisation.lien,
            "dotted_name": cotisation.dotted_name,
            "branche": cotisation.branche.value,
            "montant": self._montant_partage(cotisation.montant),
        }
