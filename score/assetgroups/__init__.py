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
This module makes the :term:`groups <group>` of a web resource optimizer
available to view code. For each group it knows the source files per asset
type (javascript and css) and, if a build step has produced one, the
:term:`minified artifact` that can be served instead.

The groups are loaded lazily on first use, so the module can be configured at
startup, before the collaborators providing the resource model are ready.
"""

from ._init import (
    init, ConfiguredAssetGroupsModule, Context, GroupNotFound)
from .group import FilesGroup
from .registry import ConfigRegistry, NotInitializedError


__all__ = (
    'init', 'ConfiguredAssetGroupsModule', 'Context', 'GroupNotFound',
    'FilesGroup', 'ConfigRegistry', 'NotInitializedError',)
