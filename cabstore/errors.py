#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

class CabStoreError(Exception):
    pass
class IoFailed(CabStoreError):
    pass
class ArchiveInvalid(CabStoreError):
    pass
class MetadataInvalid(CabStoreError):
    pass
class NoReleases(CabStoreError):
    pass
class Cancelled(CabStoreError):
    pass
