import re
from typing import Optional

# Maior id aceito; o cadastro legado guardava as operadoras em inteiro de 32 bits
MAX_INT32 = 2**31 - 1

_NON_DIGITS = re.compile(r"[^0-9]+")


def only_digits(value: str) -> str:
    """Remove tudo que não for dígito ASCII."""
    return _NON_DIGITS.sub("", value)


def parse_unsigned(value: str, max_value: int = MAX_INT32) -> Optional[int]:
    """
    Extrai os dígitos de `value` e converte para inteiro (zeros à esquerda somem).
    Retorna None quando não há dígitos ou o número passa de `max_value`.
    """
    digits = only_digits(value)
    if not digits:
        return None
    number = int(digits)
    if number > max_value:
        return None
    return number
