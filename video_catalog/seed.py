"""Curated starter catalog loaded into fresh stores."""

from __future__ import annotations

from .models import DraftVideo

STARTER_VIDEOS: tuple[DraftVideo, ...] = (
    DraftVideo(
        video_id="S15e-qC1S0I",
        title="Où va l'IA ? (Feu de Bengale)",
        uploader="Feu de Bengale • 215K vues",
        keywords=["IA", "Modèles de Langage", "Éthique", "Alignement", "Régulation"],
        summary=(
            "Analyse approfondie de la trajectoire actuelle de l'intelligence artificielle, de ses "
            "capacités émergentes (modèles de langage) aux risques sociétaux et existentiels. "
            "Discussion sur l'alignement et la régulation."
        ),
        admin_annotation=(
            "Excellent point de départ pour le débat sur l'IA forte. Pertinent pour le cours ISC-8001."
        ),
    ),
    DraftVideo(
        video_id="9to-e4c1Eho",
        title="Le Problème Difficile de la Conscience (David Chalmers)",
        uploader="David Chalmers (TED) • 2.5M vues",
        keywords=["Conscience", "Philosophie", "Neurosciences", "Problème Difficile", "Subjectivité"],
        summary=(
            'Le philosophe David Chalmers explore le "problème difficile" de la conscience : pourquoi '
            "et comment les processus physiques du cerveau donnent-ils lieu à une expérience "
            'subjective riche ? Il distingue les problèmes "faciles" (mécanismes) du problème '
            '"difficile" (l\'expérience elle-même).'
        ),
    ),
    DraftVideo(
        video_id="7s0CpR_FNA4",
        title="La Théorie du Langage de Chomsky",
        uploader="The Brain Maze • 325K vues",
        keywords=["Langage", "Linguistique", "Chomsky", "Grammaire Universelle", "Cognition"],
        summary=(
            "Cette vidéo résume les concepts clés de la théorie linguistique de Noam Chomsky, "
            "notamment la grammaire universelle, l'innéisme et le dispositif d'acquisition du "
            "langage (LAD). Elle oppose sa vision aux approches béhavioristes."
        ),
        admin_annotation="Référence classique pour l'acquisition du langage.",
    ),
    DraftVideo(
        video_id="rS1-50LY0gA",
        title="Qu'est-ce que la Science Cognitive ?",
        uploader="Ryan Rhodes • 110K vues",
        keywords=["Science Cognitive", "Interdisciplinaire", "Esprit", "Cerveau", "Computation"],
        summary=(
            "Une introduction claire à ce qu'est la science cognitive. La vidéo la définit comme "
            "l'étude interdisciplinaire de l'esprit et de l'intelligence, combinant la psychologie, "
            "l'informatique, les neurosciences, la linguistique et la philosophie."
        ),
        admin_annotation="Bonne vidéo d'introduction pour les nouveaux étudiants.",
    ),
    DraftVideo(
        video_id="Rz1x02nnlqg",
        title="La conscience, par Stanislas Dehaene",
        uploader="Collège de France • 180K vues",
        keywords=[
            "Conscience",
            "Stanislas Dehaene",
            "Espace de Travail Global",
            "Neurosciences",
            "Signature Cérébrale",
        ],
        summary=(
            'Stanislas Dehaene présente ses travaux sur les "signatures" cérébrales de la conscience. '
            "Il expose la théorie de l'espace de travail neuronal global (Global Neuronal Workspace), "
            "suggérant que la conscience émerge lorsqu'une information est largement diffusée à "
            "travers différents modules cérébraux."
        ),
    ),
    DraftVideo(
        video_id="i3OYlaoj-SY",
        title="Yuval Harari et Lex Fridman sur l'IA",
        uploader="Lex Fridman • 5.2M vues",
        keywords=["IA", "Yuval Noah Harari", "Lex Fridman", "Société", "Avenir"],
        summary=(
            "Une conversation profonde entre Yuval Noah Harari et Lex Fridman sur l'impact potentiel "
            "de l'intelligence artificielle sur l'humanité, l'avenir des sociétés, le pouvoir "
            "narratif et les risques existentiels."
        ),
        admin_annotation="Perspective philosophique et sociétale importante.",
    ),
)
