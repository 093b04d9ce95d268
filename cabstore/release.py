#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+
#
# pylint: disable=too-many-instance-attributes

import enum

class SizeKind(enum.IntEnum):
    UNKNOWN = 0
    INSTALLED = 1
    DOWNLOAD = 2

class Checksum():

    def __init__(self, value=None, kind=None, target=None, filename=None):
        self.value = value
        self.kind = kind
        self.target = target
        self.filename = filename

    def __repr__(self):
        return 'Checksum({}:{}:{})'.format(self.target, self.kind, self.value)

class Release():
    """ A versioned release of a component, optionally carrying binary blobs """

    def __init__(self, version=None, timestamp=0):
        self.version = version
        self.timestamp = timestamp
        self.description = None
        self.urgency = None
        self.filename = None
        self.checksums = []
        self.blobs = {}
        self._sizes = {}

    def get_size(self, kind):
        return self._sizes.get(kind, 0)

    def set_size(self, kind, value):
        self._sizes[kind] = int(value)

    def get_blob(self, key):
        return self.blobs.get(key)

    def set_blob(self, key, data):
        self.blobs[key] = data

    def get_checksum_by_target(self, target):
        for csum in self.checksums:
            if csum.target == target:
                return csum
        return None

    def __repr__(self):
        return 'Release({}:{})'.format(self.version, ','.join(sorted(self.blobs)))
