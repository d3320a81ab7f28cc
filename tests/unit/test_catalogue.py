"""Tests du catalogue de regles et de la localisation."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from pydantic import ValidationError

from fiche_de_paie.core.exceptions import ParseError
from fiche_de_paie.core.resultat import TypeErreur
from fiche_de_paie.models.catalogue import CatalogueRegles, RegleCatalogue
from fiche_de_paie.utils.noms import decoder_nom_regle, encoder_nom_regle


class TestEncodageNomRegle:
    """Tests de l'encodage des dotted names en liens."""

    def test_encodage_simple(self):
        assert (
            encoder_nom_regle("contrat salarié . salaire . net à payer")
            == "contrat-salarié/salaire/net-à-payer"
        )

    def test_tiret_devient_insecable(self):
        assert encoder_nom_regle("contrat salarié . CSG-CRDS") == "contrat-salarié/CSG\u2011CRDS"

    def test_decodage_inverse(self):
        nom = "contrat salarié . CSG-CRDS . part déductible"
        assert decoder_nom_regle(encoder_nom_regle(nom)) == nom


class TestCatalogueRegles:
    """Tests de la localisation des regles."""

    def setup_method(self):
        self.catalogue = CatalogueRegles.depuis_liste([
            {"dottedName": "contrat salarié . salaire . brut", "titre": "Salaire brut"},
            {"dottedName": "contrat salarié . salaire . net", "nom": "net"},
            {"dottedName": "contrat salarié . chômage"},
        ])

    def test_libelle_depuis_titre(self):
        resultat = self.catalogue.localiser("contrat salarié . salaire . brut")
        assert resultat.est_ok
        assert resultat.valeur.nom == "Salaire brut"
        assert resultat.valeur.lien == "/règle/contrat-salarié/salaire/brut"

    def test_libelle_depuis_nom_sans_titre(self):
        resultat = self.catalogue.localiser("contrat salarié . salaire . net")
        assert resultat.valeur.nom == "net"

    def test_nom_par_defaut_dernier_segment(self):
        regle = self.catalogue.trouver("contrat salarié . chômage")
        assert regle.nom == "chômage"
        assert self.catalogue.localiser("contrat salarié . chômage").valeur.nom == "chômage"

    def test_regle_introuvable(self):
        resultat = self.catalogue.localiser("contrat salarié . inconnue")
        assert not resultat.est_ok
        assert resultat.erreur.type == TypeErreur.REGLE_INTROUVABLE
        assert resultat.erreur.dotted_name == "contrat salarié . inconnue"

    def test_contient_et_taille(self):
        assert "contrat salarié . salaire . brut" in self.catalogue
        assert "contrat salarié . inconnue" not in self.catalogue
        assert len(self.catalogue) == 3

    def test_construction_depuis_modeles(self):
        catalogue = CatalogueRegles([RegleCatalogue(dotted_name="a . b", titre="B")])
        assert catalogue.localiser("a . b").valeur.nom == "B"

    def test_catalogue_invalide(self):
        with pytest.raises(ParseError):
            CatalogueRegles.depuis_liste([{"titre": "sans dotted name"}])

    def test_nom_par_defaut_a_la_construction(self):
        regle = RegleCatalogue(dotted_name="a . b")
        assert regle.nom == "b"
        assert RegleCatalogue(dotted_name="a . b", nom="autre").nom == "autre"

    def test_regle_non_modifiable(self):
        regle = RegleCatalogue(dotted_name="a . b")
        with pytest.raises(ValidationError):
            regle.nom = "c"
