#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+
#
# pylint: disable=fixme

import logging

from . errors import MetadataInvalid, NoReleases
from . metainfo import AppSourceKind, AppParseFlags, guess_source_kind, parse_file
from . release import SizeKind
from . settings import FIRMWARE_FILENAME_DEFAULT

log = logging.getLogger(__name__)

def _load_metainfo(fn, size):

    try:
        app = parse_file(fn, AppParseFlags.NONE)
    except MetadataInvalid as e:
        raise MetadataInvalid('{} could not be loaded: {}'.format(fn, str(e))) from e

    # check release was valid
    release = app.get_release_default()
    if not release:
        raise NoReleases('no releases in metainfo file')

    # fix up legacy files
    if not release.filename:
        release.filename = FIRMWARE_FILENAME_DEFAULT

    # this is the size of the cab file itself
    if size > 0 and release.get_size(SizeKind.DOWNLOAD) == 0:
        release.set_size(SizeKind.DOWNLOAD, size)
    return app

def scan_metainfo(scratch, filenames, size=0):
    """ Loads a component from every metainfo file extracted from the archive """
    apps = []
    for idx, filename in enumerate(filenames):
        log.debug('found file %i\t%s', idx, filename)
        kind = guess_source_kind(filename)
        if kind == AppSourceKind.METAINFO:
            apps.append(_load_metainfo(scratch.resolve(filename), size))
        elif kind == AppSourceKind.INF:
            # FIXME: the firmware details could be read from the [Version] section
            log.debug('ignoring driver descriptor %s', filename)
    return apps
