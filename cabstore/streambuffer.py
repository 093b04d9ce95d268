#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import io
import logging

from . cancellable import _check_cancelled
from . errors import CabStoreError, IoFailed
from . settings import get_chunk_size

log = logging.getLogger(__name__)

def _read_chunks(stream, blob, cancellable, chunk_size):
    size = 0
    while True:
        _check_cancelled(cancellable)
        try:
            data = stream.read(chunk_size)
        except OSError as e:
            raise IoFailed('failed to read stream: {}'.format(str(e))) from e
        if not data:
            break
        size += len(data)
        blob.write(data)
    return size

def buffer_stream(stream, cancellable=None, chunk_size=None):
    """ Reads a possibly non-seekable stream into a seekable in-memory blob

    Returns the blob, rewound to the start, and the number of bytes read.
    """
    blob = io.BytesIO()
    try:
        size = _read_chunks(stream, blob, cancellable, get_chunk_size(chunk_size))
    except CabStoreError:
        blob.close()
        raise
    blob.seek(0)
    log.debug('buffered %i bytes', size)
    return blob, size
