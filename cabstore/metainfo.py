#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import datetime
import enum

from lxml import etree as ET

from . app import App
from . errors import MetadataInvalid
from . release import Release, Checksum, SizeKind
from . util import _get_basename_safe, _text_from_description, _unwrap_xml_text

class AppSourceKind(enum.IntEnum):
    UNKNOWN = 0
    METAINFO = 1
    APPDATA = 2
    INF = 3

class AppParseFlags(enum.IntFlag):
    NONE = 0
    ALLOW_MISSING_ID = 1

def guess_source_kind(filename):
    """ Guesses what kind of document a file is from the name alone """
    basename = _get_basename_safe(filename)
    if basename.endswith('.metainfo.xml'):
        return AppSourceKind.METAINFO
    if basename.endswith('.appdata.xml'):
        return AppSourceKind.APPDATA
    if basename.lower().endswith('.inf'):
        return AppSourceKind.INF
    return AppSourceKind.UNKNOWN

def _node_text(node):
    if node is None or not node.text:
        return None
    text = _unwrap_xml_text(node.text)
    if not text:
        return None
    return text

def _first_text(parent, xpath):
    try:
        return _node_text(parent.xpath(xpath)[0])
    except IndexError as _:
        return None

def _parse_release(node):

    release = Release()

    # fix up hex version
    release.version = node.get('version')
    if release.version and release.version.startswith('0x'):
        try:
            release.version = str(int(release.version[2:], 16))
        except ValueError as e:
            raise MetadataInvalid('<release> has invalid version: {}'.format(str(e))) from e

    # date, falling back to timestamp
    if 'date' in node.attrib:
        try:
            dt = datetime.datetime.strptime(node.get('date'), "%Y-%m-%d")
            dt_utc = dt.replace(tzinfo=datetime.timezone.utc)
            release.timestamp = int(dt_utc.timestamp())
        except ValueError as e:
            raise MetadataInvalid('<release> has invalid date attribute: {}'.format(str(e))) from e
    elif 'timestamp' in node.attrib:
        try:
            release.timestamp = int(node.get('timestamp'))
        except ValueError as e:
            raise MetadataInvalid('<release> has invalid timestamp attribute: {}'.format(str(e))) from e

    release.urgency = node.get('urgency')

    # get description
    try:
        release.description = _text_from_description(node.xpath('description')[0])
    except IndexError as _:
        pass

    # sizes are optional, and zero means unknown
    for size in node.xpath('size'):
        if size.get('type') == 'installed':
            kind = SizeKind.INSTALLED
        elif size.get('type') == 'download':
            kind = SizeKind.DOWNLOAD
        else:
            continue
        try:
            release.set_size(kind, int(_node_text(size) or '0'))
        except ValueError as e:
            raise MetadataInvalid('<size> has invalid value: {}'.format(str(e))) from e

    # the content checksum names the firmware payload
    for csum in node.xpath('checksum'):
        release.checksums.append(Checksum(value=_node_text(csum),
                                          kind=csum.get('type', csum.get('kind')),
                                          target=csum.get('target'),
                                          filename=csum.get('filename')))
    csum = release.get_checksum_by_target('content')
    if csum and csum.filename:
        release.filename = csum.filename
    return release

def _parse_component(component, flags):

    app = App()
    app.kind = component.get('type')
    try:
        app.priority = int(component.get('priority', '0'))
    except ValueError as e:
        raise MetadataInvalid('<component> has invalid priority: {}'.format(str(e))) from e

    # get <id>
    app.id = _first_text(component, 'id')
    if not app.id and not flags & AppParseFlags.ALLOW_MISSING_ID:
        raise MetadataInvalid('<id> tag missing')

    app.name = _first_text(component, 'name')
    app.summary = _first_text(component, 'summary')
    app.developer_name = _first_text(component, 'developer_name')
    try:
        app.description = _text_from_description(component.xpath('description')[0])
    except IndexError as _:
        pass

    # releases stay in the order they were declared
    for node in component.xpath('releases/release'):
        app.add_release(_parse_release(node))
    return app

def parse_data(buf, flags=AppParseFlags.NONE):
    """ Parses a metainfo document from bytes """
    try:
        components = ET.fromstring(buf).xpath('/component')
    except ET.XMLSyntaxError as e:
        raise MetadataInvalid('The metadata file could not be parsed: {}'.format(str(e))) from e
    if not components:
        raise MetadataInvalid('<component> tag missing')
    return _parse_component(components[0], flags)

def parse_file(filename, flags=AppParseFlags.NONE):
    """ Parses a metainfo file from disk """
    try:
        with open(filename, 'rb') as f:
            buf = f.read()
    except OSError as e:
        raise MetadataInvalid('failed to read: {}'.format(str(e))) from e
    app = parse_data(buf, flags)
    app.source_filename = filename
    return app
