#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+
#
# pylint: disable=wrong-import-position

import os
import sys
import threading
import unittest
from unittest import mock

# allows us to run this from the project root
sys.path.append(os.path.realpath('.'))

from cabstore import Cancellable, Cancelled
from cabstore.settings import get_chunk_size, get_tmpdir

class TestSettings(unittest.TestCase):

    def test_chunk_size(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_chunk_size(), 8192)
            self.assertEqual(get_chunk_size(512), 512)
        with mock.patch.dict(os.environ, {'CABSTORE_CHUNK_SIZE': '1024'}):
            self.assertEqual(get_chunk_size(), 1024)
            self.assertEqual(get_chunk_size(512), 512)
        for value in ['fubar', '0', '-1']:
            with mock.patch.dict(os.environ, {'CABSTORE_CHUNK_SIZE': value}):
                self.assertEqual(get_chunk_size(), 8192)

    def test_tmpdir(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(get_tmpdir())
            self.assertEqual(get_tmpdir('/var/tmp'), '/var/tmp')
        with mock.patch.dict(os.environ, {'CABSTORE_TMPDIR': '/srv/tmp'}):
            self.assertEqual(get_tmpdir(), '/srv/tmp')
            self.assertEqual(get_tmpdir('/var/tmp'), '/var/tmp')

class TestCancellable(unittest.TestCase):

    def test_cancel(self):
        cancellable = Cancellable()
        self.assertFalse(cancellable.is_cancelled())
        cancellable.raise_if_cancelled()

        # from another thread
        thread = threading.Thread(target=cancellable.cancel)
        thread.start()
        thread.join()
        self.assertTrue(cancellable.is_cancelled())
        with self.assertRaises(Cancelled):
            cancellable.raise_if_cancelled()

        cancellable.reset()
        self.assertFalse(cancellable.is_cancelled())

if __name__ == '__main__':
    unittest.main()
