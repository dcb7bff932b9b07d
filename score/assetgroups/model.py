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
The resource model describes which :term:`groups <group>` exist and which
resources they consist of. This module does not care how the model is built:
it asks a :class:`ModelFactory` for it whenever it needs one.
"""

import abc
import enum
import posixpath
from collections import namedtuple


class ResourceType(enum.Enum):

    JS = 'js'
    CSS = 'css'

    @classmethod
    def from_uri(cls, uri):
        """
        Determines the type of a resource by the extension of its *uri*.
        """
        path = uri.split('?', maxsplit=1)[0]
        extension = posixpath.splitext(path)[1].lstrip('.').lower()
        try:
            return cls(extension)
        except ValueError:
            raise ValueError('Unsupported resource type: %s' % uri)


Resource = namedtuple('Resource', ('uri', 'type'))


class Group:
    """
    A named, ordered list of :class:`resources <Resource>`.
    """

    def __init__(self, name, resources=()):
        self.name = name
        self.resources = list(resources)

    def collect_resources_of_type(self, type):
        """
        Returns a new group with the same name containing only resources of
        given *type*, keeping their order.
        """
        return Group(self.name, (r for r in self.resources if r.type == type))


class Model:

    def __init__(self, groups=()):
        self.groups = list(groups)

    def get_group(self, name):
        for group in self.groups:
            if group.name == name:
                return group
        return None


class ModelFactory(abc.ABC):
    """
    Collaborator providing the current resource model.
    """

    @abc.abstractmethod
    def create(self):
        """
        Returns a new :class:`Model`.
        """


class ConfiguredModelFactory(ModelFactory):
    """
    A :class:`ModelFactory` building its model from a mapping of group names
    to URI lists. The type of each resource is guessed from its URI:

    >>> factory = ConfiguredModelFactory({
    ...     'main': ['/js/jquery.js', '/css/reset.css', '/js/main.js'],
    ... })
    >>> [r.uri for r in factory.create().groups[0].resources]
    ['/js/jquery.js', '/css/reset.css', '/js/main.js']
    """

    def __init__(self, declarations):
        self.declarations = []
        for name, uris in declarations.items():
            resources = tuple(Resource(uri, ResourceType.from_uri(uri))
                              for uri in uris)
            self.declarations.append((name, resources))

    def create(self):
        return Model(Group(name, resources)
                     for name, resources in self.declarations)
