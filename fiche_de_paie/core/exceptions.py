"""Exceptions personnalisees pour la construction de la fiche de paie."""


class FicheDePaieError(Exception):
    """Exception de base."""


class CatalogueManquantError(FicheDePaieError):
    """Le catalogue de regles est absent."""


class RegleIntrouvableError(FicheDePaieError):
    """La regle n'existe pas dans le catalogue."""

    def __init__(self, message: str, dotted_name: str = ""):
        super().__init__(message)
        self.dotted_name = dotted_name


class AnalyseManquanteError(FicheDePaieError):
    """L'analyse est absente."""


class RegleIntrouvableDansAnalyseError(FicheDePaieError):
    """La regle n'est ni dans le cache ni dans les cibles de l'analyse."""

    def __init__(self, message: str, dotted_name: str = ""):
        super().__init__(message)
        self.dotted_name = dotted_name


class ParseError(FicheDePaieError):
    """Donnees d'entree invalides (analyse ou catalogue)."""


class ExportError(FicheDePaieError):
    """Erreur lors de l'export de la fiche de paie."""
