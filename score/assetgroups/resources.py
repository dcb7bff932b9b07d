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

import abc
import logging
import os
import posixpath


log = logging.getLogger(__name__)


class ResourceSpace(abc.ABC):
    """
    The files a web application serves, addressed by absolute paths like
    ``/wro/main-0b2931cc.min.js``.
    """

    @abc.abstractmethod
    def list_paths(self, basepath):
        """
        Returns the set of paths found directly beneath *basepath*. Folders are
        returned with a trailing slash. If there is nothing to list at
        *basepath*, the return value is `None`.
        """


class FolderResourceSpace(ResourceSpace):
    """
    A :class:`ResourceSpace` backed by a folder on the file system, which is
    regarded as the root of the web application.
    """

    def __init__(self, rootdir):
        self.rootdir = rootdir

    def list_paths(self, basepath):
        if not basepath.endswith('/'):
            basepath += '/'
        folder = os.path.join(self.rootdir, *basepath.strip('/').split('/'))
        try:
            entries = list(os.scandir(folder))
        except (FileNotFoundError, NotADirectoryError):
            log.debug('No folder to list at %s', folder)
            return None
        except PermissionError:
            log.debug('Folder %s is not readable', folder)
            return None
        if not entries:
            return None
        paths = set()
        for entry in entries:
            path = posixpath.join(basepath, entry.name)
            if entry.is_dir():
                path += '/'
            paths.add(path)
        return paths
