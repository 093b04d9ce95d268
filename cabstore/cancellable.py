#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import threading

from . errors import Cancelled

class Cancellable():
    """ A token that can be tripped from any thread to abort an ingest """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    def reset(self):
        self._event.clear()

    def is_cancelled(self):
        return self._event.is_set()

    def raise_if_cancelled(self):
        if self._event.is_set():
            raise Cancelled('Operation was cancelled')

    def __repr__(self):
        return 'Cancellable({})'.format(self.is_cancelled())

def _check_cancelled(cancellable):
    if cancellable is not None:
        cancellable.raise_if_cancelled()
