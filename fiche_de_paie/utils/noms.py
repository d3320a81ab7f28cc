"""Encodage des noms de regles (dotted names) pour les liens."""

import re

TRAIT_INSECABLE = "\u2011"


def encoder_nom_regle(dotted_name: str) -> str:
    """Encode un dotted name en chemin d'URL.

    ``contrat salarié . salaire . net à payer`` devient
    ``contrat-salarié/salaire/net-à-payer`` ; les tirets d'origine sont
    remplaces par des tirets insecables pour rester reversibles.
    """
    nom = re.sub(r"\s\.\s", "/", dotted_name)
    nom = nom.replace("-", TRAIT_INSECABLE)
    return re.sub(r"\s", "-", nom)


def decoder_nom_regle(nom_encode: str) -> str:
    """Inverse de ``encoder_nom_regle``."""
    nom = nom_encode.replace("/", " . ")
    nom = nom.replace("-", " ")
    return nom.replace(TRAIT_INSECABLE, "-")


def dernier_segment(dotted_name: str) -> str:
    """Nom court d'une regle : ``a . b . c`` -> ``c``."""
    return dotted_name.split(" . ")[-1].strip()
