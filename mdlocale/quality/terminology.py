"""Accepted terminology variants per target language.

The first variant of each term is the preferred form.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

TerminologyTable = Mapping[str, Mapping[str, Tuple[str, ...]]]


def freeze_terminology(table: Mapping[str, Mapping[str, Tuple[str, ...] | list[str]]]) -> TerminologyTable:
    """Return a read-only copy of ``table``."""
    return MappingProxyType(
        {
            language: MappingProxyType({term: tuple(variants) for term, variants in terms.items()})
            for language, terms in table.items()
        }
    )


DEFAULT_TERMINOLOGY: TerminologyTable = freeze_terminology(
    {
        "en": {
            "blockchain": ("blockchain", "block chain"),
            "cryptocurrency": ("cryptocurrency", "crypto currency", "crypto-currency"),
            "smart contract": ("smart contract", "smart-contract"),
        },
        "es": {
            "blockchain": ("cadena de bloques", "blockchain", "cadena de bloque"),
            "cryptocurrency": ("criptomoneda", "cripto moneda", "moneda digital"),
            "smart contract": ("contrato inteligente", "smart contract"),
        },
        "fr": {
            "blockchain": ("chaîne de blocs", "blockchain", "chaîne de bloc"),
            "cryptocurrency": ("cryptomonnaie", "crypto-monnaie", "monnaie numérique"),
            "smart contract": ("contrat intelligent", "smart contract"),
        },
    }
)
