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

"""
The :class:`ConfigRegistry` knows all :term:`groups <group>` of a web
application and the files belonging to them. It is populated lazily: the
collaborators it needs can only be queried once the application is serving
requests.
"""

import logging
import threading
import types

from .group import FilesGroup
from .model import ResourceType
from .naming import parse_artifact_name


log = logging.getLogger(__name__)


class NotInitializedError(Exception):
    """
    Raised when groups are accessed before they were loaded, or before the
    registry was even created. This always indicates an error in the startup
    sequence of the application.
    """


class ConfigRegistry:
    """
    Maps group names to :class:`FilesGroup` objects.

    The *context* is the handle to the hosting application and must provide
    two attributes: a :class:`ModelFactory
    <score.assetgroups.model.ModelFactory>` as ``model_factory`` and a
    :class:`ResourceSpace
    <score.assetgroups.resources.ResourceSpace>` as ``resources``. The
    latter is searched for :term:`minified artifacts <minified artifact>`
    beneath *basepath*.
    """

    def __init__(self, context, basepath='/wro/'):
        self._context = context
        self.basepath = basepath
        self._lock = threading.Lock()
        self._groups = None

    @property
    def context(self):
        return self._context

    @property
    def initialized(self):
        return self._groups is not None

    @property
    def groups(self):
        """
        A read-only mapping of group names to :class:`FilesGroup` objects.
        """
        groups = self._groups
        if groups is None:
            raise NotInitializedError('Groups were not loaded yet')
        return groups

    def initialize(self):
        """
        Loads all groups, unless this was done already. Concurrent callers
        will block until the first one has finished loading. Errors of the
        model factory are passed through and the next call will try again.
        """
        if self._groups is not None:
            return self
        with self._lock:
            if self._groups is None:
                self._groups = self._load()
        return self

    def reload(self):
        """
        Replaces all groups with freshly loaded ones.
        """
        with self._lock:
            self._groups = self._load()
        return self

    def get_group(self, name):
        """
        Returns the :class:`FilesGroup` with given *name*, or `None` if there
        is no such group. Never triggers loading: the registry must have been
        :meth:`initialized <initialize>` before.
        """
        groups = self._groups
        if groups is None:
            raise NotInitializedError(
                'ConfigRegistry was not correctly initialized')
        return groups.get(name)

    def _load(self):
        groups = self._load_config()
        self._load_minimized_files(groups)
        log.info('Loaded %d asset groups', len(groups))
        # published only once complete, readers never see a partial mapping
        return types.MappingProxyType(groups)

    def _load_config(self):
        model = self._context.model_factory.create()
        groups = {}
        for group in model.groups:
            files_group = FilesGroup(group.name)
            files_group.put(
                'js', self._get_files_for(group, ResourceType.JS))
            files_group.put(
                'css', self._get_files_for(group, ResourceType.CSS))
            groups[group.name] = files_group
        return groups

    def _get_files_for(self, group, type):
        filtered = group.collect_resources_of_type(type)
        return [resource.uri for resource in filtered.resources]

    def _load_minimized_files(self, groups):
        paths = self._context.resources.list_paths(self.basepath)
        if not paths:
            log.debug('No minified artifacts found beneath %s', self.basepath)
            return
        for path in paths:
            match = parse_artifact_name(path, groups)
            if match is None:
                log.debug('Ignoring %s', path)
                continue
            name, type = match
            groups[name].put_minimized_file(type, path)
