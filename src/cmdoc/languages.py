# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Target-language names substituted for the ``LANG`` placeholder."""

LANGUAGE_NAMES: tuple[str, ...] = (
    "ASM",
    "ASM-ATT",
    "ASM_MASM",
    "ASM_MARMASM",
    "ASM_NASM",
    "C",
    "CSharp",
    "CUDA",
    "CXX",
    "Fortran",
    "HIP",
    "ISPC",
    "OBJC",
    "OBJCXX",
    "Swift",
)
