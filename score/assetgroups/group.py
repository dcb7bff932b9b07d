# Copyright © 2015-2018 STRG.AT GmbH, Vienna, Austria
#
# This file is part of the The SCORE Framework.
#
# The SCORE Framework and all its parts are free software: you can redistribute
# them and/or modify them under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation which is in the
# file named COPYING.LESSER.txt.
#
# The SCORE Framework and all its parts are distributed without any WARRANTY;
# without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. For more details see the GNU Lesser General Public
# License.
#
# If you have not received a copy of the GNU Lesser General Public License see
# http://www.gnu.org/licenses/.
#
# The License-Agreement realised between you as Licensee and STRG.AT GmbH as
# Licenser including the issue of its valid conclusion and its pre- and
# post-contractual effects is governed by the laws of Austria. Any disputes
# concerning this License-Agreement including the issue of its valid conclusion
# and its pre- and post-contractual effects are exclusively decided by the
# competent court, in whose district STRG.AT GmbH has its registered seat, at
# the discretion of STRG.AT GmbH also the competent court, in whose district the
# Licensee has his registered seat, an establishment or assets.

import xxhash


class FilesGroup:
    """
    The files of a single :term:`group`, as seen by view code. It holds the
    source URIs per asset type (``js`` or ``css``) in their load order and,
    optionally, the path to a :term:`minified artifact` per type.
    """

    def __init__(self, name):
        self._name = name
        self.files = {}
        self.minimized_files = {}

    @property
    def name(self):
        return self._name

    def put(self, type, files):
        """
        Sets the source URIs for given asset *type*.
        """
        self.files[type] = tuple(files)

    def put_minimized_file(self, type, path):
        """
        Sets the path of the minified artifact for given asset *type*,
        replacing any previous value.
        """
        self.minimized_files[type] = path

    def get_files(self, type):
        return self.files.get(type, ())

    def get_minimized_file(self, type):
        return self.minimized_files.get(type)

    def hash(self, type):
        """
        Provides a hash over the source URIs of given *type*, that can be used
        as the suffix of a minified artifact's file name.
        """
        hash = xxhash.xxh64()
        for file in self.get_files(type):
            hash.update(file.encode('UTF-8'))
            hash.update(b'\0')
        return hash.hexdigest()

    def __repr__(self):
        return '<FilesGroup %s>' % self._name
