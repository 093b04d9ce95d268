#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2018-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os
import logging

from cabarchive import CabArchive, CorruptionError, NotSupportedError

from . errors import ArchiveInvalid, IoFailed
from . util import _get_member_relpath

log = logging.getLogger(__name__)

class CabExtractor():
    """ Loads a MS Cabinet archive from a seekable blob and unpacks it to disk """

    def __init__(self, blob):
        self._blob = blob
        self._cabarchive = None

    def load(self):
        try:
            self._blob.seek(0)
            buf = self._blob.read()
        except OSError as e:
            raise IoFailed('failed to read stream: {}'.format(str(e))) from e
        if not buf:
            raise ArchiveInvalid('cannot load .cab file: no data')
        try:
            self._cabarchive = CabArchive(buf, flattern=False)
        except (CorruptionError, NotSupportedError, UnicodeDecodeError) as e:
            raise ArchiveInvalid('cannot load .cab file: {}'.format(str(e))) from e
        log.debug('loaded archive with %i files', len(self._cabarchive))

    @property
    def filenames(self):
        if self._cabarchive is None:
            return []
        return list(self._cabarchive)

    def extract(self, path, callback=None):
        """ Writes every member below path, returning the member names in order """
        if self._cabarchive is None:
            self.load()
        filenames = []
        for filename, cabfile in self._cabarchive.items():
            relpath = _get_member_relpath(filename)
            if not relpath:
                raise ArchiveInvalid('failed to extract .cab file: '
                                     'invalid filename {}'.format(filename))
            fn = os.path.join(path, relpath)
            if callback:
                callback(filename)
            try:
                os.makedirs(os.path.dirname(fn), exist_ok=True)
                with open(fn, 'wb') as f:
                    f.write(cabfile.buf or b'')
            except OSError as e:
                raise ArchiveInvalid('failed to extract .cab file: {}'.format(str(e))) from e
            filenames.append(filename)
        return filenames

    def __repr__(self):
        return 'CabExtractor({})'.format(self.filenames)
