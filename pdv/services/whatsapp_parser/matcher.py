"""Matcher de produtos usando distância de edição."""

from __future__ import annotations

import math
from typing import Optional, Sequence, TypeVar

from rapidfuzz.distance import Levenshtein

from pdv.services.whatsapp_parser.normalizer import normalize

# Configurações de threshold
MAX_DISTANCE = 2  # Teto de edições aceitas em consultas longas
DISTANCE_RATIO = 0.3  # Tolerância proporcional ao tamanho da consulta
MIN_WORD_LENGTH = 3  # Palavras menores não entram no match por palavra

T = TypeVar("T")


def levenshtein(a: str, b: str) -> int:
    """Distância de Levenshtein com custo unitário para inserção, remoção e troca."""
    return Levenshtein.distance(a, b)


def find_best_match(query: str, products: Sequence[T], max_distance: int = MAX_DISTANCE) -> Optional[T]:
    """
    Encontra o produto mais próximo do texto digitado.

    Camadas, avaliadas produto a produto na ordem do catálogo:
    1. Igualdade ou substring (em qualquer direção) após normalização:
       retorna na hora.
    2. Distância entre o texto e o nome completo.
    3. Distância entre o texto e cada palavra significativa do nome
       ("galinha" encontra "Galinha Caipira").

    As camadas 2 e 3 percorrem o catálogo inteiro e ficam com a menor
    distância dentro do threshold.
    """
    normalized_query = normalize(query)
    threshold = min(max_distance, math.floor(len(normalized_query) * DISTANCE_RATIO))

    best_match: Optional[T] = None
    best_score = math.inf

    for product in products:
        normalized_name = normalize(product.name)

        if (
            normalized_name == normalized_query
            or normalized_query in normalized_name
            or normalized_name in normalized_query
        ):
            return product

        distance = levenshtein(normalized_query, normalized_name)
        if distance <= threshold and distance < best_score:
            best_score = distance
            best_match = product

        for word in normalized_name.split():
            if len(word) < MIN_WORD_LENGTH:
                continue
            word_distance = levenshtein(normalized_query, word)
            if word_distance <= threshold and word_distance < best_score:
                best_score = word_distance
                best_match = product

    return best_match
