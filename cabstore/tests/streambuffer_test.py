#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+
#
# pylint: disable=wrong-import-position,too-few-public-methods

import os
import sys
import io
import unittest

# allows us to run this from the project root
sys.path.append(os.path.realpath('.'))

from cabstore import Cancellable, Cancelled, IoFailed, buffer_stream

class ChunkedStream():
    """ A non-seekable stream that returns short reads """

    def __init__(self, buf, max_read=100, cancellable=None, cancel_after=0):
        self._buf = buf
        self._max_read = max_read
        self._cancellable = cancellable
        self._cancel_after = cancel_after
        self.reads = []

    def read(self, size):
        self.reads.append(size)
        if self._cancellable and len(self.reads) == self._cancel_after:
            self._cancellable.cancel()
        data = self._buf[:min(size, self._max_read)]
        self._buf = self._buf[len(data):]
        return data

class BrokenStream():

    def read(self, _size):
        raise OSError('Input/output error')

class TestStreamBuffer(unittest.TestCase):

    def test_empty(self):
        blob, size = buffer_stream(io.BytesIO(b''))
        self.assertEqual(size, 0)
        self.assertEqual(blob.read(), b'')

    def test_chunks(self):
        buf = os.urandom(20000)
        blob, size = buffer_stream(io.BytesIO(buf))
        self.assertEqual(size, 20000)
        self.assertEqual(blob.tell(), 0)
        self.assertEqual(blob.read(), buf)

        # seekable
        blob.seek(10000)
        self.assertEqual(blob.read(4), buf[10000:10004])

    def test_chunk_size(self):
        stream = ChunkedStream(b'x' * 20000, max_read=20000)
        _, size = buffer_stream(stream)
        self.assertEqual(size, 20000)
        self.assertEqual(stream.reads, [8192, 8192, 8192, 8192])

        stream = ChunkedStream(b'x' * 10, max_read=20000)
        _, size = buffer_stream(stream, chunk_size=4)
        self.assertEqual(size, 10)
        self.assertEqual(stream.reads, [4, 4, 4, 4])

    def test_short_reads(self):
        buf = b'0123456789' * 100
        blob, size = buffer_stream(ChunkedStream(buf, max_read=7))
        self.assertEqual(size, len(buf))
        self.assertEqual(blob.getvalue(), buf)

    def test_read_error(self):
        with self.assertRaises(IoFailed):
            buffer_stream(BrokenStream())

    def test_cancelled(self):
        cancellable = Cancellable()
        stream = ChunkedStream(b'x' * 1000, max_read=10,
                               cancellable=cancellable, cancel_after=2)
        with self.assertRaises(Cancelled):
            buffer_stream(stream, cancellable)
        self.assertEqual(len(stream.reads), 2)

    def test_cancelled_before_start(self):
        cancellable = Cancellable()
        cancellable.cancel()
        stream = ChunkedStream(b'x' * 1000)
        with self.assertRaises(Cancelled):
            buffer_stream(stream, cancellable)
        self.assertEqual(stream.reads, [])

if __name__ == '__main__':
    unittest.main()
