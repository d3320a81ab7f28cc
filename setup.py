"""Setup pour Fiche de Paie."""

from setuptools import setup, find_packages

setup(
    name="fiche_de_paie",
    version="1.0.0",
    description="Construction de fiches de paie a partir d'une analyse de regles sociales",
    author="AJ",
    python_requires=">=3.10",
    packages=find_packages(include=["fiche_de_paie", "fiche_de_paie.*"]),
    entry_points={
        "console_scripts": [
            "fiche-de-paie=fiche_de_paie.main:main",
        ],
    },
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
)
