"""Resolution d'une regle de l'analyse en ligne nommee avec montant."""

from typing import Optional

from fiche_de_paie.core.resultat import Erreur, Resultat
from fiche_de_paie.models.analyse import Analyse
from fiche_de_paie.models.catalogue import LocalisateurRegles
from fiche_de_paie.models.fiche import RegleAvecMontant
from fiche_de_paie.utils.number_utils import en_montant


def resoudre_montant(
    analyse: Optional[Analyse],
    localisateur: LocalisateurRegles,
    dotted_name: str,
) -> Resultat[RegleAvecMontant]:
    """Libelle, lien et montant de ``dotted_name``.

    Le noeud est cherche dans le cache puis dans les cibles ; une valeur
    absente vaut zero.
    """
    if analyse is None:
        return Resultat.echec(Erreur.analyse_manquante())

    noeud = analyse.trouver_noeud(dotted_name)
    if noeud is None:
        return Resultat.echec(Erreur.regle_introuvable_dans_analyse(dotted_name))

    return localisateur.localiser(dotted_name).map(
        lambda regle: RegleAvecMontant(
            nom=regle.nom,
            lien=regle.lien,
            montant=en_montant(noeud.node_value),
        )
    )
