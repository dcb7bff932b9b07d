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

from score.init import (
    ConfiguredModule, ConfigurationError, parse_list, parse_bool,
    parse_dotted_path)
import os
import threading
from collections import namedtuple

from .model import ModelFactory, ConfiguredModelFactory
from .registry import ConfigRegistry, NotInitializedError
from .resources import FolderResourceSpace, ResourceSpace

Context = namedtuple('Context', ('model_factory', 'resources'))

defaults = {
    'rootdir': None,
    'basepath': '/wro/',
    'model': None,
    'resource_domain': '',
    'minimize': True,
}


def init(confdict, tpl=None):
    """
    Initializes this module acoording to :ref:`our module initialization
    guidelines <module_initialization>` with the following configuration keys:

    :confkey:`rootdir` :confdefault:`None`
        The folder serving as the root of the web application. Minified
        artifacts are searched in the folder denoted by ``basepath`` beneath
        it. If this value is missing, no artifacts will be found.

    :confkey:`basepath` :confdefault:`/wro/`
        The path, relative to ``rootdir``, containing the :term:`minified
        artifacts <minified artifact>`.

    :confkey:`group.*`
        Every key starting with ``group.`` declares a :term:`group`. The rest
        of the key is the name of the group and the value is the list of its
        source URIs, in the order they must be loaded in::

            group.main =
                /js/jquery.js
                /js/main.js
                /css/main.css

    :confkey:`model` :confdefault:`None`
        Dotted path to a :class:`ModelFactory
        <score.assetgroups.model.ModelFactory>` (or a sub-class thereof) to use
        instead of the ``group.*`` declarations.

    :confkey:`resource_domain` :confdefault:`""`
        A prefix to prepend to all URLs returned by
        :meth:`ConfiguredAssetGroupsModule.urls`, like
        ``//static.example.com``.

    :confkey:`minimize` :confdefault:`True`
        Whether :meth:`ConfiguredAssetGroupsModule.urls` should return the URL
        of a minified artifact instead of the source files, if there is one.
    """
    conf = dict(defaults.items())
    conf.update(confdict)
    if conf['rootdir'] and not os.path.isdir(conf['rootdir']):
        raise ConfigurationError(
            'score.assetgroups', 'Configured rootdir does not exist')
    if conf['model']:
        model_factory = parse_dotted_path(conf['model'])
        if isinstance(model_factory, type):
            model_factory = model_factory()
        if not isinstance(model_factory, ModelFactory):
            raise ConfigurationError(
                'score.assetgroups', 'Configured model is not a ModelFactory')
    else:
        declarations = dict(
            (key[len('group.'):], parse_list(value))
            for key, value in confdict.items()
            if key.startswith('group.'))
        try:
            model_factory = ConfiguredModelFactory(declarations)
        except ValueError as e:
            raise ConfigurationError('score.assetgroups', str(e)) from e
    resources = FolderResourceSpace(conf['rootdir']) \
        if conf['rootdir'] else EmptyResourceSpace()
    return ConfiguredAssetGroupsModule(
        tpl, Context(model_factory, resources), conf['basepath'],
        conf['resource_domain'], parse_bool(conf['minimize']))


class EmptyResourceSpace(ResourceSpace):
    """
    The :class:`ResourceSpace` used if no ``rootdir`` was configured.
    """

    def list_paths(self, basepath):
        return None


class ConfiguredAssetGroupsModule(ConfiguredModule):
    """
    This module's :class:`configuration class
    <score.init.ConfiguredModule>`. It owns the :class:`ConfigRegistry
    <score.assetgroups.ConfigRegistry>` of the application.
    """

    def __init__(self, tpl, context, basepath, resource_domain, minimize):
        super().__init__(__package__)
        self.tpl = tpl
        self.context = context
        self.basepath = basepath
        self.resource_domain = resource_domain
        self.minimize = minimize
        self._instance = None
        self._instance_lock = threading.Lock()
        if tpl:
            self._register_tpl_globals()

    def _register_tpl_globals(self):
        self.tpl.filetypes['text/html'].add_global(
            'assetgroups_urls', self.urls, escape=False)

    def _finalize(self, score):
        self.create_instance(self.context)

    def create_instance(self, context):
        """
        Creates the :class:`ConfigRegistry
        <score.assetgroups.ConfigRegistry>` using given *context*. Subsequent
        calls have no effect, the first *context* is retained.
        """
        with self._instance_lock:
            if self._instance is None:
                self._instance = ConfigRegistry(context, self.basepath)
        return self._instance

    def get_instance(self):
        """
        Returns the fully loaded :class:`ConfigRegistry
        <score.assetgroups.ConfigRegistry>`, loading it first, if necessary.
        Raises :exc:`NotInitializedError
        <score.assetgroups.NotInitializedError>` if :meth:`create_instance`
        was not called yet.
        """
        instance = self._instance
        if instance is None:
            raise NotInitializedError('The instance was not created.')
        return instance.initialize()

    def get_group(self, name):
        """
        Shortcut for ``get_instance().get_group(name)``.
        """
        return self.get_instance().get_group(name)

    def urls(self, group, type):
        """
        Returns the list of URLs view code should load for the assets of given
        *type* in given *group*. This is either a single minified artifact or
        the list of source files.
        """
        files_group = self.get_group(group)
        if files_group is None:
            raise GroupNotFound(group)
        minimized = files_group.get_minimized_file(type)
        if self.minimize and minimized:
            return [self.resource_domain + minimized]
        return [self.resource_domain + file
                for file in files_group.get_files(type)]


class GroupNotFound(Exception):
    """
    Thrown when the URLs of an unknown group were requested.
    """

    def __init__(self, group):
        self.group = group
        super().__init__(group)
