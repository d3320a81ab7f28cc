"""Utilitaires pour le traitement des montants."""

from decimal import Decimal
from typing import Union


def en_montant(valeur: Union[Decimal, bool, int, float, None]) -> Decimal:
    """Convertit une valeur de noeud validee en montant.

    Une valeur absente ou fausse (None, False, 0) vaut zero. Les flottants
    passent par ``str`` pour ne pas importer leur representation binaire.
    """
    if not valeur:
        return Decimal("0")
    if isinstance(valeur, Decimal):
        return valeur
    if isinstance(valeur, bool):
        return Decimal(int(valeur))
    return Decimal(str(valeur))
