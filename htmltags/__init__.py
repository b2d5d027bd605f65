# The htmltags project
#   Copyright (c) 2017 Garry Ercoli <Garry@GErcoli.com>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.


"""
The htmltags project provides a small object model for assembling trees of
HTML (or XHTML) elements in memory and rendering them to nicely indented
markup.

The following modules are defined:

* :mod:`htmltags.tag` - the :class:`~htmltags.tag.TagNode` class, which
  represents a single element with its attributes, classes and content, and
  renders itself (and its children) to a string.

* :mod:`htmltags.factory` - the :class:`~htmltags.factory.TagFactory`
  convenience builder, for constructing :class:`~htmltags.tag.TagNode` trees
  with keyword-argument attributes.

* :mod:`htmltags.html` - entity escaping helpers shared by the above.
"""

# Stop pylint's crusade against nicely aligned code
# pylint: disable=bad-whitespace

__project__      = 'htmltags'
__version__      = '0.1'
__keywords__     = ['html', 'xhtml', 'markup', 'tags']
__author__       = 'Garry Ercoli'
__author_email__ = 'Garry@GErcoli.com'
__url__          = 'https://www.gercoli.com/'
__platforms__    = 'ALL'

__requires__ = ['voluptuous']

__extra_requires__ = {
    'test': ['pytest', 'coverage'],
}

__classifiers__ = [
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3',
    'Topic :: Text Processing :: Markup :: HTML',
]

__entry_points__ = {}
