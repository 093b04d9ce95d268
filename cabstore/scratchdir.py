#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os
import shutil
import tempfile
import logging

from . errors import IoFailed
from . settings import TMPDIR_PREFIX, get_tmpdir
from . util import _get_member_relpath

log = logging.getLogger(__name__)

class ScratchDir():
    """ A uniquely named temporary directory removed on every exit path

    .. code-block:: python

        with ScratchDir() as scratch:
            scratch.track('firmware.bin')
            with open(scratch.resolve('firmware.bin'), 'wb') as f:
                f.write(buf)
    """

    def __init__(self, prefix=TMPDIR_PREFIX, tmpdir=None):
        self.prefix = prefix
        self.tmpdir = get_tmpdir(tmpdir)
        self.path = None
        self.filenames = []

    def create(self):
        try:
            self.path = tempfile.mkdtemp(prefix=self.prefix, dir=self.tmpdir)
        except OSError as e:
            raise IoFailed('failed to create temp dir: {}'.format(str(e))) from e
        log.debug('created %s', self.path)
        return self

    def track(self, filename):
        if filename not in self.filenames:
            self.filenames.append(filename)

    def resolve(self, filename):
        relpath = _get_member_relpath(filename)
        if not relpath:
            return None
        return os.path.join(self.path, relpath)

    def cleanup(self):
        if not self.path:
            return

        # delete the files we know about
        for filename in self.filenames:
            fn = self.resolve(filename)
            if not fn or not os.path.lexists(fn):
                continue
            try:
                os.unlink(fn)
            except OSError as e:
                log.warning('failed to delete %s: %s', fn, str(e))

        # and anything left behind, e.g. intermediate directories
        try:
            shutil.rmtree(self.path)
        except OSError as e:
            log.warning('failed to delete %s: %s', self.path, str(e))
        log.debug('deleted %s', self.path)
        self.path = None
        self.filenames = []

    def __enter__(self):
        return self.create()

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()

    def __repr__(self):
        return 'ScratchDir({}:{})'.format(self.path, self.filenames)
