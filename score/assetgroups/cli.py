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

import click
from .naming import artifact_name as make_artifact_name


@click.group()
def main():
    """
    Inspects asset groups.
    """
    pass


@main.command()
@click.pass_context
def groups(clickctx):
    """
    Lists all group names
    """
    assetgroups = clickctx.obj['conf'].load('assetgroups')
    for name in sorted(assetgroups.get_instance().groups):
        print(name)


@main.command()
@click.argument('group')
@click.argument('type', required=False)
@click.pass_context
def files(clickctx, group, type):
    """
    Lists the source files of a group
    """
    files_group = _get_group(clickctx, group)
    if type:
        types = (type,)
    else:
        types = sorted(files_group.files)
    for type in types:
        for file in files_group.get_files(type):
            print('%s %s' % (type, file))


@main.command()
@click.argument('group', required=False)
@click.pass_context
def minimized(clickctx, group):
    """
    Lists the minified artifacts found for groups
    """
    if group:
        files_groups = (_get_group(clickctx, group),)
    else:
        assetgroups = clickctx.obj['conf'].load('assetgroups')
        groups = assetgroups.get_instance().groups
        files_groups = (groups[name] for name in sorted(groups))
    for files_group in files_groups:
        for type, path in sorted(files_group.minimized_files.items()):
            print('%s/%s %s' % (files_group.name, type, path))


@main.command('artifact-name')
@click.argument('group')
@click.argument('type')
@click.pass_context
def artifact_name(clickctx, group, type):
    """
    Provides the file name for a minified artifact
    """
    files_group = _get_group(clickctx, group)
    print(make_artifact_name(group, type, files_group.hash(type)))


def _get_group(clickctx, name):
    assetgroups = clickctx.obj['conf'].load('assetgroups')
    files_group = assetgroups.get_group(name)
    if files_group is None:
        raise click.ClickException('Unknown group: %s' % name)
    return files_group


if __name__ == '__main__':
    main()
