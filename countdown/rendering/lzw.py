# -*- coding: utf-8 -*-
"""
Compressão LZW de largura variável usada nos blocos de imagem do GIF
"""

from typing import Iterable

MAX_BITS = 12
MAX_CODES = 1 << MAX_BITS
SUB_BLOCK_SIZE = 255


def encode(indices: Iterable[int], min_code_size: int = 8) -> bytes:
    """
    Codifica índices de paleta (0..2**min_code_size-1) em LZW do GIF

    O código de clear abre o stream e é reemitido quando a tabela enche;
    os códigos são empacotados LSB-first.
    """
    clear_code = 1 << min_code_size
    end_code = clear_code + 1

    out = bytearray()
    bit_buffer = 0
    bit_count = 0
    code_size = min_code_size + 1
    next_code = end_code + 1
    table: dict[int, int] = {}

    def emit(code: int) -> None:
        nonlocal bit_buffer, bit_count, code_size
        bit_buffer |= code << bit_count
        bit_count += code_size
        while bit_count >= 8:
            out.append(bit_buffer & 0xFF)
            bit_buffer >>= 8
            bit_count -= 8
        # o decoder alarga o código assim que o próximo slot não cabe
        if next_code >= (1 << code_size) and code_size < MAX_BITS:
            code_size += 1

    emit(clear_code)

    pixels = iter(indices)
    prefix = next(pixels, None)
    if prefix is not None:
        for pixel in pixels:
            key = (prefix << min_code_size) | pixel
            code = table.get(key)
            if code is not None:
                prefix = code
                continue

            emit(prefix)
            if next_code < MAX_CODES:
                table[key] = next_code
                next_code += 1
            else:
                emit(clear_code)
                table.clear()
                code_size = min_code_size + 1
                next_code = end_code + 1
            prefix = pixel
        emit(prefix)

    emit(end_code)
    if bit_count:
        out.append(bit_buffer & 0xFF)
    return bytes(out)


def pack_sub_blocks(data: bytes) -> bytes:
    """Divide os dados em sub-blocos de até 255 bytes + terminador"""
    out = bytearray()
    for i in range(0, len(data), SUB_BLOCK_SIZE):
        chunk = data[i : i + SUB_BLOCK_SIZE]
        out.append(len(chunk))
        out.extend(chunk)
    out.append(0)
    return bytes(out)
