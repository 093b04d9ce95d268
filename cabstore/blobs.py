#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os
import logging

from . errors import IoFailed
from . release import SizeKind
from . util import _get_basename_safe

log = logging.getLogger(__name__)

def _get_contents(fn):
    try:
        with open(fn, 'rb') as f:
            return f.read()
    except OSError as e:
        raise IoFailed('failed to open {}: {}'.format(fn, str(e))) from e

def set_release_blobs(release, path):
    """ Attaches the firmware and detached signature from path to the release """

    # get the firmware filename
    if not release.filename:
        return
    rel_basename = _get_basename_safe(release.filename)
    if not rel_basename:
        return
    rel_fn = os.path.join(path, rel_basename)

    # add this information to the release objects
    if os.path.exists(rel_fn):
        data = _get_contents(rel_fn)

        # this is the size of the firmware
        if release.get_size(SizeKind.INSTALLED) == 0:
            release.set_size(SizeKind.INSTALLED, len(data))
        release.set_blob(rel_basename, data)
    else:
        log.debug('%s not found in archive', rel_basename)

    # if the signing file exists, set that too
    asc_basename = rel_basename + '.asc'
    asc_fn = os.path.join(path, asc_basename)
    if os.path.exists(asc_fn):
        release.set_blob(asc_basename, _get_contents(asc_fn))

def attach_blobs(apps, path):
    """ Adds firmware blobs referenced by each release of each component """
    for app in apps:
        for release in app.releases:
            set_release_blobs(release, path)
