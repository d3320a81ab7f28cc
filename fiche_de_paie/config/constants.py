"""
Constantes de construction de la fiche de paie.

Noms de regles (dotted names) lus dans l'analyse, chemins d'acces dans
l'arbre d'explication et ordre d'affichage des branches de cotisations.
"""

from enum import Enum


class Branche(str, Enum):
    """Branches de la securite sociale, dans l'ordre d'affichage de la fiche."""
    SANTE = "santé"
    ACCIDENTS_TRAVAIL = "accidents du travail / maladies professionnelles"
    RETRAITE = "retraite"
    FAMILLE = "famille"
    ASSURANCE_CHOMAGE = "assurance chômage"
    LOGEMENT = "logement"
    AUTRES = "autres"


# L'ordre de declaration de l'enum fait foi (ni alphabetique, ni issu des donnees)
ORDRE_BRANCHES: tuple[Branche, ...] = tuple(Branche)


# --- Regles lues dans l'analyse ---

SALAIRE_DE_BASE = "contrat salarié . salaire . brut de base"
AVANTAGES_EN_NATURE = "contrat salarié . avantages en nature . montant"
SALAIRE_BRUT = "contrat salarié . salaire . brut"
COTISATIONS_SALARIALES = "contrat salarié . cotisations salariales"
COTISATIONS_PATRONALES = "contrat salarié . cotisations patronales"
REDUCTIONS_DE_COTISATIONS = "contrat salarié . réductions de cotisations"
SALAIRE_CHARGE = "contrat salarié . salaire . total"
SALAIRE_NET = "contrat salarié . salaire . net"
SALAIRE_NET_IMPOSABLE = "contrat salarié . salaire . net imposable"
SALAIRE_NET_A_PAYER = "contrat salarié . salaire . net à payer"

# Agregats dont l'explication liste les variables de cotisation
AGREGATS_COTISATIONS = (COTISATIONS_SALARIALES, COTISATIONS_PATRONALES)

# Chemin vers la liste des variables sous un agregat
CHEMIN_VARIABLES_COTISATION = ("explanation", "formule", "explanation", "explanation")


# --- Chemins de repli, par ordre de priorite ---

CHEMINS_DU_PAR = (
    ("cotisation", "dû par"),
    ("taxe", "dû par"),
    ("explanation", "cotisation", "dû par"),
    ("explanation", "taxe", "dû par"),
)

CHEMINS_BRANCHE = (
    ("cotisation", "branche"),
    ("taxe", "branche"),
    ("explanation", "cotisation", "branche"),
    ("explanation", "taxe", "branche"),
)

# Valeurs de "dû par" qui designent le salarie
DEBITEURS_SALARIE = frozenset({"salarié", "employé"})

# Prefixe des liens vers la documentation d'une regle
PREFIXE_LIEN_REGLE = "/règle/"
