"""Configuration globale de l'application."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ExportConfig:
    """Configuration de l'export JSON."""
    indent_json: int = 2
    ensure_ascii: bool = False
    prefixe_fichier: str = "fiche_de_paie"


@dataclass
class AppConfig:
    """Configuration principale de l'application."""
    base_dir: Path = field(default_factory=Path.cwd)
    output_dir: Optional[Path] = None
    export: ExportConfig = field(default_factory=ExportConfig)

    def __post_init__(self):
        if self.output_dir is None:
            self.output_dir = self.base_dir / "fiches"
