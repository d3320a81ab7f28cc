"""Tests de la resolution des lignes nommees et du canal d'erreur."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from decimal import Decimal

import pytest

from fiche_de_paie.core.exceptions import (
    AnalyseManquanteError, ParseError, RegleIntrouvableDansAnalyseError,
)
from fiche_de_paie.core.resultat import Erreur, Resultat, TypeErreur, collecter
from fiche_de_paie.models.analyse import Analyse
from fiche_de_paie.models.catalogue import CatalogueRegles
from fiche_de_paie.rules.montants import resoudre_montant
from fiche_de_paie.utils.number_utils import en_montant

BRUT = "contrat salarié . salaire . brut"
NET = "contrat salarié . salaire . net"


class TestEnMontant:
    """Tests de la conversion des valeurs de noeud."""

    def test_valeurs_fausses_a_zero(self):
        for valeur in (None, False, 0, ""):
            assert en_montant(valeur) == Decimal("0")

    def test_flottant_sans_bruit_binaire(self):
        assert en_montant(0.1) == Decimal("0.1")


class TestResoudreMontant:
    """Tests du resolveur de montants."""

    def setup_method(self):
        self.catalogue = CatalogueRegles.depuis_liste([
            {"dottedName": BRUT, "titre": "Salaire brut"},
            {"dottedName": NET, "titre": "Salaire net"},
            {"dottedName": "contrat salarié . absente"},
        ])

    def test_depuis_le_cache(self):
        analyse = Analyse.depuis_dict({"cache": {BRUT: {"nodeValue": 2000}}})
        resultat = resoudre_montant(analyse, self.catalogue, BRUT)
        assert resultat.est_ok
        assert resultat.valeur.montant == Decimal("2000")
        assert resultat.valeur.nom == "Salaire brut"
        assert resultat.valeur.lien == "/règle/contrat-salarié/salaire/brut"

    def test_cache_prioritaire_sur_les_cibles(self):
        analyse = Analyse.depuis_dict({
            "cache": {BRUT: {"nodeValue": 2000}},
            "targets": [{"dottedName": BRUT, "nodeValue": 1}],
        })
        assert resoudre_montant(analyse, self.catalogue, BRUT).valeur.montant == Decimal("2000")

    def test_repli_sur_les_cibles(self):
        analyse = Analyse.depuis_dict({
            "cache": {},
            "targets": [{"dottedName": NET, "nodeValue": 1543.21}],
        })
        assert resoudre_montant(analyse, self.catalogue, NET).valeur.montant == Decimal("1543.21")

    def test_valeur_absente_vaut_zero(self):
        analyse = Analyse.depuis_dict({"cache": {BRUT: {"nodeValue": None}}})
        assert resoudre_montant(analyse, self.catalogue, BRUT).valeur.montant == Decimal("0")

    def test_valeur_false_vaut_zero(self):
        analyse = Analyse.depuis_dict({"cache": {BRUT: {"nodeValue": False}}})
        assert resoudre_montant(analyse, self.catalogue, BRUT).valeur.montant == Decimal("0")

    def test_analyse_manquante(self):
        resultat = resoudre_montant(None, self.catalogue, BRUT)
        assert resultat.erreur.type == TypeErreur.ANALYSE_MANQUANTE

    def test_regle_introuvable_dans_analyse(self):
        analyse = Analyse.depuis_dict({"cache": {}})
        resultat = resoudre_montant(analyse, self.catalogue, "contrat salarié . absente")
        assert resultat.erreur.type == TypeErreur.REGLE_INTROUVABLE_DANS_ANALYSE
        assert resultat.erreur.dotted_name == "contrat salarié . absente"

    def test_regle_absente_du_catalogue(self):
        analyse = Analyse.depuis_dict({"cache": {"x . y": {"nodeValue": 3}}})
        resultat = resoudre_montant(analyse, self.catalogue, "x . y")
        assert resultat.erreur.type == TypeErreur.REGLE_INTROUVABLE

    def test_analyse_invalide(self):
        with pytest.raises(ParseError):
            Analyse.depuis_dict({"cache": ["pas", "un", "dict"]})

    def test_valeur_textuelle_rejetee(self):
        with pytest.raises(ParseError):
            Analyse.depuis_dict({"cache": {BRUT: {"nodeValue": "non applicable"}}})


class TestResultat:
    """Tests du type Resultat."""

    def test_map_propage_l_echec(self):
        echec = Resultat.echec(Erreur.analyse_manquante())
        assert echec.map(lambda v: v + 1) == echec

    def test_valeur_ou_lever(self):
        assert Resultat.ok(3).valeur_ou_lever() == 3
        with pytest.raises(AnalyseManquanteError):
            Resultat.echec(Erreur.analyse_manquante()).valeur_ou_lever()

    def test_exception_porte_le_dotted_name(self):
        with pytest.raises(RegleIntrouvableDansAnalyseError) as exc:
            Resultat.echec(Erreur.regle_introuvable_dans_analyse("a . b")).valeur_ou_lever()
        assert exc.value.dotted_name == "a . b"

    def test_collecter_s_arrete_au_premier_echec(self):
        premier = Erreur.regle_introuvable("a")
        resultats = [Resultat.ok(1), Resultat.echec(premier), Resultat.echec(Erreur.regle_introuvable("b"))]
        assert collecter(resultats).erreur == premier
        assert collecter([Resultat.ok(1), Resultat.ok(2)]).valeur == [1, 2]
