#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os
import enum
import logging

from . blobs import attach_blobs
from . cancellable import _check_cancelled
from . errors import CabStoreError, IoFailed
from . extractor import CabExtractor
from . scan import scan_metainfo
from . scratchdir import ScratchDir
from . streambuffer import buffer_stream

log = logging.getLogger(__name__)

class IngestState(enum.Enum):
    INIT = 'init'
    BUFFERED = 'buffered'
    EXTRACTED = 'extracted'
    SCANNED = 'scanned'
    ATTACHED = 'attached'
    PUBLISHED = 'published'
    CLEANED = 'cleaned'
    FAILED = 'failed'

class CabIngest():
    """ Adds the components found in a firmware cabinet archive to a store

    .. code-block:: python

        store = Store()
        CabIngest(store).ingest_file('hughski-colorhug2-2.0.3.cab')
        for app in store.get_apps():
            print(app.id, app.get_release_default().blobs.keys())
    """

    def __init__(self, store, tmpdir=None, chunk_size=None):
        self.store = store
        self.tmpdir = tmpdir
        self.chunk_size = chunk_size
        self.state = IngestState.INIT
        self.failed_state = None

    def _set_state(self, state):
        log.debug('%s -> %s', self.state.value, state.value)
        self.state = state

    def _set_failed(self, e):
        log.debug('failed when %s: %s', self.state.value, str(e))
        self.failed_state = self.state
        self.state = IngestState.FAILED

    def ingest_stream(self, blob, size=0, cancellable=None):
        """ Extracts a seekable blob and adds any components to the store """
        try:
            extractor = CabExtractor(blob)
            extractor.load()
            _check_cancelled(cancellable)

            # decompress to a private directory that is always removed
            with ScratchDir(tmpdir=self.tmpdir) as scratch:
                filenames = extractor.extract(scratch.path, scratch.track)
                self._set_state(IngestState.EXTRACTED)
                _check_cancelled(cancellable)

                # loop through each file looking for components
                apps = scan_metainfo(scratch, filenames, size)
                self._set_state(IngestState.SCANNED)

                # add firmware blobs referenced by the metainfo files
                attach_blobs(apps, scratch.path)
                self._set_state(IngestState.ATTACHED)

                for app in apps:
                    self.store.add_app(app)
                self._set_state(IngestState.PUBLISHED)
        except CabStoreError as e:
            self._set_failed(e)
            raise
        self._set_state(IngestState.CLEANED)

    def ingest_fd(self, fd, cancellable=None):
        """ Takes ownership of an open descriptor or binary file and ingests it """
        try:
            stream = open(fd, 'rb', closefd=True) if isinstance(fd, int) else fd
        except OSError as e:
            self._set_failed(e)
            raise IoFailed('Failed to open fd {}: {}'.format(fd, str(e))) from e

        # the archive reader needs random access, so buffer to RAM then load
        try:
            with stream:
                blob, size = buffer_stream(stream, cancellable, self.chunk_size)
        except CabStoreError as e:
            self._set_failed(e)
            raise
        self._set_state(IngestState.BUFFERED)
        with blob:
            self.ingest_stream(blob, size, cancellable)

    def ingest_file(self, filename, cancellable=None):
        """ Ingests an archive on disk, using the basename as the store origin """
        try:
            _check_cancelled(cancellable)
            try:
                size = os.stat(filename).st_size
            except OSError as e:
                raise IoFailed('Failed to get info for {}: {}'.format(filename, str(e))) from e
            _check_cancelled(cancellable)
            try:
                stream = open(filename, 'rb')
            except OSError as e:
                raise IoFailed('Failed to open {}: {}'.format(filename, str(e))) from e
        except CabStoreError as e:
            self._set_failed(e)
            raise
        with stream:
            self.store.set_origin(os.path.basename(filename))
            self._set_state(IngestState.BUFFERED)
            self.ingest_stream(stream, size, cancellable)

def ingest_stream(store, blob, size=0, cancellable=None, tmpdir=None):
    CabIngest(store, tmpdir=tmpdir).ingest_stream(blob, size, cancellable)

def ingest_fd(store, fd, cancellable=None, tmpdir=None):
    CabIngest(store, tmpdir=tmpdir).ingest_fd(fd, cancellable)

def ingest_file(store, filename, cancellable=None, tmpdir=None):
    CabIngest(store, tmpdir=tmpdir).ingest_file(filename, cancellable)
