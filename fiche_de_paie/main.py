"""Point d'entree CLI pour la fiche de paie.

Usage :
    fiche-de-paie analyse.json regles.json [--output fiche.json] [--verbose]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fiche_de_paie.config.settings import AppConfig
from fiche_de_paie.core.assembleur import construire_ou_lever
from fiche_de_paie.core.exceptions import FicheDePaieError, ParseError
from fiche_de_paie.models.analyse import Analyse
from fiche_de_paie.models.catalogue import CatalogueRegles
from fiche_de_paie.reporting.report_generator import PayslipReportGenerator


def configurer_logging(verbose: bool = False) -> None:
    """Configure le logging de l'application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def creer_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fiche-de-paie",
        description="Construit une fiche de paie a partir d'une analyse de regles.",
    )
    parser.add_argument(
        "analyse",
        type=Path,
        help="Fichier JSON de l'analyse (cache et targets)",
    )
    parser.add_argument(
        "regles",
        type=Path,
        help="Fichier JSON du catalogue de regles (flat rules)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Fichier de sortie (defaut: <output_dir>/fiche_de_paie_<analyse>.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Mode verbeux (debug)",
    )
    return parser


def lire_json(chemin: Path):
    """Charge un fichier JSON d'entree."""
    try:
        with open(chemin, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise ParseError(f"Impossible de lire {chemin} : {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"JSON invalide dans {chemin} : {e}") from e


def main(argv: list[str] | None = None) -> int:
    """Point d'entree principal."""
    parser = creer_argument_parser()
    args = parser.parse_args(argv)

    configurer_logging(args.verbose)
    logger = logging.getLogger("fiche_de_paie")

    config = AppConfig()
    chemin_sortie = args.output or (
        config.output_dir / f"{config.export.prefixe_fichier}_{args.analyse.stem}.json"
    )

    try:
        analyse = Analyse.depuis_dict(lire_json(args.analyse))
        catalogue = CatalogueRegles.depuis_liste(lire_json(args.regles))
        logger.info(
            "Analyse : %d noeud(s) en cache, %d cible(s) ; catalogue : %d regle(s)",
            len(analyse.cache), len(analyse.targets), len(catalogue),
        )
        fiche = construire_ou_lever(analyse, catalogue)
        PayslipReportGenerator(config.export).generer_json(fiche, chemin_sortie)
        logger.info("Fiche de paie generee : %s", chemin_sortie)
        return 0

    except FicheDePaieError as e:
        logger.error("Erreur de construction de la fiche : %s", e)
        return 1
    except Exception as e:
        logger.exception("Erreur inattendue : %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
