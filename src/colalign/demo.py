"""Multiplication table modulo n, rendered through an alignment proxy."""

from __future__ import annotations

from .exceptions import ValidationError
from .proxy import AlignProxy


def multiplication_table(proxy: AlignProxy, modulus: int = 11) -> None:
    """
    Write the multiplication table of the non-zero residues modulo ``modulus``.

    Columns are declared up front (width 2, no label) so that ``next_cell``
    wraps each row after the last residue.

    Raises:
        ValidationError: If modulus is smaller than 3
    """
    if modulus < 3:
        raise ValidationError(f"modulus must be >= 3, got {modulus}")

    for _ in range(1, modulus):
        proxy.set_header("", 2)
    proxy.end_row()

    proxy.horizontal_rule()
    for i in range(1, modulus):
        for j in range(1, modulus):
            proxy.write(i * j % modulus)
            proxy.next_cell()
    proxy.horizontal_rule()
