#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+
#
# pylint: disable=too-many-instance-attributes

from . vercmp import vercmp

class App():
    """ An AppStream component, typically loaded from a metainfo file """

    def __init__(self, appstream_id=None):
        self.id = appstream_id
        self.kind = None
        self.name = None
        self.summary = None
        self.description = None
        self.developer_name = None
        self.priority = 0
        self.origin = None
        self.source_filename = None
        self.releases = []

    def add_release(self, release):
        if release in self.releases:
            return
        self.releases.append(release)

    def get_release_default(self):
        """ Gets the newest release, preferring the earliest declared on a tie """
        release_newest = None
        for release in self.releases:
            if release_newest is None or vercmp(release.version, release_newest.version) > 0:
                release_newest = release
        return release_newest

    def __repr__(self):
        return 'App({}:{})'.format(self.id, [str(release) for release in self.releases])
