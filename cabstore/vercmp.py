#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2018-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

from itertools import zip_longest

def _vercmp_char(chr1, chr2):
    if chr1 == chr2:
        return 0
    if chr1 == '~':
        return -1
    if chr2 == '~':
        return 1
    if not chr1:
        return -1
    if not chr2:
        return 1
    if ord(chr1) < ord(chr2):
        return -1
    return 1

def _strtoll(val):
    """ Parses a value, returning the numeric part and any string suffix """
    num_part = ''
    str_part = ''
    for char in val:
        if not str_part and char.isdigit():
            num_part += char
            continue
        str_part += char
    if not num_part:
        return 0, str_part
    return int(num_part), str_part

def _version_from_hex(version):
    if not version.startswith('0x'):
        return version
    try:
        return str(int(version[2:], 16))
    except ValueError as _:
        return version

def vercmp(version_a, version_b):
    """ Compares two AppStream versions, returning <0, 0 or >0

    A missing version always sorts before a present one.
    """

    # nothing to compare
    if not version_a and not version_b:
        return 0
    if not version_a:
        return -1
    if not version_b:
        return 1

    # optimisation
    if version_a == version_b:
        return 0

    version_a = _version_from_hex(version_a)
    version_b = _version_from_hex(version_b)

    # split into sections, and try to parse
    for split_a, split_b in zip_longest(version_a.split('.'), version_b.split('.')):

        # we lost or gained a dot
        if split_a is None:
            return -1
        if split_b is None:
            return 1

        # compare integers if simple
        ver_a, str_a = _strtoll(split_a)
        ver_b, str_b = _strtoll(split_b)
        if ver_a < ver_b:
            return -1
        if ver_a > ver_b:
            return 1

        # compare strings
        for chr1, chr2 in zip_longest(str_a, str_b):
            rc = _vercmp_char(chr1, chr2)
            if rc != 0:
                return rc

    return 0
