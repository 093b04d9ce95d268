#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import logging

log = logging.getLogger(__name__)

class Store():
    """ An in-memory collection of components with a shared origin """

    def __init__(self, origin=None):
        self.origin = origin
        self._apps = []

    def set_origin(self, origin):
        self.origin = origin

    def add_app(self, app):

        # inherit the store origin
        if not app.origin:
            app.origin = self.origin

        # replace any existing component with the same ID
        if app.id:
            for idx, app_old in enumerate(self._apps):
                if app_old.id != app.id:
                    continue
                if app_old.priority > app.priority:
                    log.debug('not replacing %s as priority %i > %i',
                              app.id, app_old.priority, app.priority)
                    return
                log.debug('replacing %s', app.id)
                self._apps[idx] = app
                return
        self._apps.append(app)

    def get_apps(self):
        return list(self._apps)

    def get_app_by_id(self, appstream_id):
        for app in self._apps:
            if app.id == appstream_id:
                return app
        return None

    def get_size(self):
        return len(self._apps)

    def __len__(self):
        return len(self._apps)

    def __repr__(self):
        return 'Store({}:{})'.format(self.origin, [str(app) for app in self._apps])
