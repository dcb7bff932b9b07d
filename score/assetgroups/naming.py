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
Minified artifacts are not registered anywhere, they are found by their file
name. An artifact for the javascript files of the group ``main`` must be named
like this::

    main-0b2931cc6255c72e.min.js

The part before the last hyphen is the :term:`group name <group>`, the
extension is the asset type. Everything in between is free-form, but may not
contain a hyphen. Files that do not follow this pattern are ignored.
"""

import posixpath


def parse_artifact_name(path, group_names):
    """
    Maps the *path* of a minified artifact back to a group. Returns a 2-tuple
    ``(group, type)`` if the file name follows the naming convention and the
    group is one of the given *group_names*, `None` otherwise.

    >>> parse_artifact_name('/wro/main-a1b2c3.min.js', {'main', 'reports'})
    ('main', 'js')
    >>> parse_artifact_name('/wro/unknown-a1b2c3.min.js', {'main'}) is None
    True
    """
    filename = posixpath.basename(path)
    basename, dot, type = filename.rpartition('.')
    if not dot or not basename or not type:
        return None
    group, hyphen, _ = basename.rpartition('-')
    if not hyphen or group not in group_names:
        return None
    return group, type


def artifact_name(group, type, suffix):
    """
    Generates the file name of a minified artifact, that
    :func:`parse_artifact_name` will resolve to *group* and *type* again.
    """
    if '-' in suffix:
        raise ValueError('Artifact suffix must not contain a hyphen: %s' %
                         suffix)
    return '%s-%s.min.%s' % (group, suffix, type)
