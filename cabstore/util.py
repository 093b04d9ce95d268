#!/usr/bin/python3
# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2020 Richard Hughes <richard@hughsie.com>
#
# SPDX-License-Identifier: GPL-2.0+

import os

def _get_basename_safe(fn):
    """ Gets the file basename, accepting win32-style backslashes """
    return os.path.basename(fn.replace('\\', '/'))

def _get_member_relpath(fn):
    """ Converts an archive member name into a relative path, or None if unsafe """
    if not fn:
        return None
    fn = fn.replace('\\', '/')
    if fn.startswith('/') or (len(fn) > 1 and fn[1] == ':'):
        return None
    sections = [section for section in fn.split('/') if section and section != '.']
    if not sections or '..' in sections:
        return None
    return os.path.join(*sections)

def _unwrap_xml_text(txt):
    txt = txt.replace('\r', '')
    new_lines = []
    for line in txt.split('\n'):
        if not line:
            continue
        new_lines.append(line.strip())
    return ' '.join(new_lines).strip()

def _text_from_description(root):
    """ return plain text paragraphs for a <description> node """
    paras = []
    for n in root:
        if n.tag == 'p':
            if n.text:
                paras.append(_unwrap_xml_text(n.text))
        elif n.tag in ['ul', 'ol']:
            items = []
            for c in n:
                if c.tag == 'li' and c.text:
                    items.append(' * ' + _unwrap_xml_text(c.text))
            if items:
                paras.append('\n'.join(items))
    if not paras and root.text:
        paras.append(_unwrap_xml_text(root.text))
    text = '\n\n'.join(paras).strip(' \n')
    if not text:
        return None
    return text
