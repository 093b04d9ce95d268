#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os

CHUNK_SIZE = 8192
TMPDIR_PREFIX = 'appstream-glib-'
FIRMWARE_FILENAME_DEFAULT = 'firmware.bin'

def get_chunk_size(chunk_size=None):
    """ explicit value, then CABSTORE_CHUNK_SIZE, then the default """
    if chunk_size:
        return chunk_size
    try:
        value = int(os.environ.get('CABSTORE_CHUNK_SIZE', CHUNK_SIZE))
    except ValueError as _:
        return CHUNK_SIZE
    if value <= 0:
        return CHUNK_SIZE
    return value

def get_tmpdir(tmpdir=None):
    """ explicit value, then CABSTORE_TMPDIR, otherwise the platform default """
    if tmpdir:
        return tmpdir
    return os.environ.get('CABSTORE_TMPDIR') or None
