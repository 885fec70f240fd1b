# app/services/operator_normalizer.py
"""
Reconcilia os formatos aceitos para a seleção de operadoras em uma única
lista canônica de ids (inteiros positivos, sem repetição, na ordem em que
apareceram).

Formatos, em ordem de prioridade:
  1. lista explícita de ids (clientes novos)
  2. CSV "12,34,56" (integrações antigas)
  3. textos dos itens da lista da tela legada, com o id de 5 caracteres
     nas posições 8..12 (contagem a partir de 1)

Tokens inválidos são descartados em silêncio, como fazia o sistema legado.
"""
from typing import Iterable, List, Optional, Sequence

from app.domain.models.user_input import ExplicitIds, LegacyCsv, LegacyListItems, OperatorSelection
from app.utils.digits import MAX_INT32, parse_unsigned

# Copy(item, 8, 5) do legado -> item[7:12]
LEGACY_ID_START = 7
LEGACY_ID_END = 12


def select_operator_input(
    operator_ids: Optional[Sequence[int]] = None,
    operators_csv: Optional[str] = None,
    operator_list_items: Optional[Sequence[str]] = None,
) -> Optional[OperatorSelection]:
    """Escolhe qual dos formatos recebidos vale para a requisição."""
    if operator_ids:
        return ExplicitIds(ids=list(operator_ids))
    if operators_csv is not None and operators_csv.strip():
        return LegacyCsv(csv=operators_csv)
    if operator_list_items:
        return LegacyListItems(items=list(operator_list_items))
    return None


def _unique_in_order(ids: Iterable[int]) -> List[int]:
    seen = set()
    out: List[int] = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out


def _is_valid_id(value: Optional[int]) -> bool:
    return value is not None and 0 < value <= MAX_INT32


def _from_csv(csv: str) -> List[int]:
    ids = []
    for token in csv.split(","):
        token = token.strip()
        if not token:
            continue
        value = parse_unsigned(token)
        if _is_valid_id(value):
            ids.append(value)
    return ids


def extract_legacy_item_id(item: str) -> Optional[int]:
    """
    Id embutido em um item da lista legada.
    Itens com 12+ caracteres: dígitos das posições 8..12.
    Itens curtos, ou cujo trecho não tem dígitos: dígitos do item inteiro.
    """
    if len(item) >= LEGACY_ID_END:
        value = parse_unsigned(item[LEGACY_ID_START:LEGACY_ID_END])
        if value is not None:
            return value
    return parse_unsigned(item)


def _from_list_items(items: Iterable[str]) -> List[int]:
    ids = []
    for item in items:
        if item is None or not item.strip():
            continue
        value = extract_legacy_item_id(item)
        if _is_valid_id(value):
            ids.append(value)
    return ids


def normalize(selection: Optional[OperatorSelection]) -> List[int]:
    """Converte qualquer formato aceito na lista canônica de ids. Nunca falha."""
    if selection is None:
        return []
    if isinstance(selection, ExplicitIds):
        ids = [i for i in selection.ids if _is_valid_id(i)]
    elif isinstance(selection, LegacyCsv):
        ids = _from_csv(selection.csv)
    elif isinstance(selection, LegacyListItems):
        ids = _from_list_items(selection.items)
    else:
        raise TypeError(f"Formato de operadoras desconhecido: {type(selection).__name__}")
    return _unique_in_order(ids)
