#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

from . errors import CabStoreError, IoFailed, ArchiveInvalid, MetadataInvalid, NoReleases, Cancelled
from . cancellable import Cancellable
from . release import Release, Checksum, SizeKind
from . app import App
from . store import Store
from . metainfo import AppSourceKind, AppParseFlags, guess_source_kind, parse_file, parse_data
from . streambuffer import buffer_stream
from . extractor import CabExtractor
from . scratchdir import ScratchDir
from . scan import scan_metainfo
from . blobs import attach_blobs, set_release_blobs
from . ingest import CabIngest, IngestState, ingest_fd, ingest_file, ingest_stream
from . vercmp import vercmp
