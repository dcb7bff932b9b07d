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
This package :ref:`integrates <framework_integration>` the module with
pyramid.

It loads the groups on the first request, provides the loaded
:class:`ConfigRegistry <score.assetgroups.ConfigRegistry>` as
``request.assetgroups`` and registers a handler for the exception
:exc:`GroupNotFound <score.assetgroups.GroupNotFound>`, which returns the HTTP
status code ``404 - Not found``.
"""

from pyramid.events import NewRequest
import score.assetgroups


def groupnotfound(exc, request):
    """
    Returns an HTTP response with status code 404. This method is registered
    in the pyramid-specific :func:`init` function.
    """
    request.response.status = 404
    return request.response


def init(confdict, configurator, tpl=None):
    """
    Performs the following steps:

    - Initializes the module via the generic :func:`initializer function
      <score.assetgroups.init>` and creates its registry.
    - Subscribes to :class:`NewRequest <pyramid.events.NewRequest>` to load the
      groups inside the first request.
    - Adds the request property ``assetgroups``.
    - Registers the view groupnotfound for a handler to the
      :exc:`GroupNotFound` Exception.
    """
    conf = score.assetgroups.init(confdict, tpl)
    conf.create_instance(conf.context)

    def load_groups(event):
        conf.get_instance()

    configurator.add_subscriber(load_groups, NewRequest)
    configurator.add_request_method(
        lambda request: conf.get_instance(), 'assetgroups', reify=True)
    configurator.add_view(groupnotfound,
                          context=score.assetgroups.GroupNotFound)
    return conf
