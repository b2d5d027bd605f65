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
Provides :class:`TagFactory`, a terse way of building :class:`TagNode` trees.

.. autoclass:: TagFactory
"""

from . import schemas
from .const import DEFAULT_TAG_PREFIX
from .schemas import validate
from .tag import TagNode


class TagFactory():
    """
    A factory class for generating :class:`~htmltags.tag.TagNode` trees.

    Instances of this class use __getattr__ magic to provide methods for
    generating any HTML element. Calling a method with a particular name
    will return a :class:`~htmltags.tag.TagNode` of that type. Any positional
    arguments will be used as content for the element, and any named
    arguments will be used as attributes for the element. If the element or
    attribute you wish to name is a reserved word in Python, you can simply
    append underscore ("_") to the name (all trailing underscore characters
    will be stripped implicitly). Other underscores in attribute names are
    converted to dashes.

    For example::

        >>> tag = TagFactory()
        >>> str(tag.a())
        '<a></a>'
        >>> str(tag.a('foo'))
        '<a>foo</a>'
        >>> str(tag.a('foo', class_='bar', data_id='1'))
        '<a class="bar" data-id="1">foo</a>'

    You can explicitly override the closing tag by setting the ``_close``
    parameter. Elements which are "void" in the HTML4 standard, e.g.
    ``<br>`` and ``<hr>`` default to having no closing tag::

        >>> str(tag.br())
        '<br>'

    If the factory is instantiated with the xhtml parameter set to True, all
    generated elements will use XHTML encoding so that elements without a
    closing tag are self-closed::

        >>> tag = TagFactory(xhtml=True)
        >>> str(tag.hr())
        '<hr />'
    """
    def __init__(self, xhtml=False, tag_prefix=DEFAULT_TAG_PREFIX):
        self._xhtml = validate(schemas.flag, xhtml, 'invalid xhtml flag')
        self._tag_prefix = validate(schemas.prefix, tag_prefix,
                                    'invalid tag prefix')

    def _format(self, content):
        if isinstance(content, (str, TagNode)):
            yield content
        elif isinstance(content, bytes):
            yield content.decode('utf-8')
        else:
            try:
                items = iter(content)
            except TypeError:
                yield str(content)
            else:
                for item in items:
                    yield from self._format(item)

    def _generate(self, _tag, *args, **kwargs):
        _tag = _tag.rstrip('_')
        node = TagNode(_tag, kwargs.pop('_close', None), self._xhtml,
                       self._tag_prefix)
        for (_k, v) in kwargs.items():
            if v is None or v is False:
                continue
            k = _k.rstrip('_').replace('_', '-')
            if v is True:
                v = k
            else:
                v = ''.join(str(item) for item in self._format(v))
            node.set_attribute(k, v)
        for arg in args:
            for item in self._format(arg):
                node.append_content(item)
        return node

    def __getattr__(self, attr):
        if attr.startswith('__'):
            raise AttributeError(attr)
        def generator(*args, **kwargs):
            return self._generate(attr, *args, **kwargs)
        setattr(self, attr, generator)
        return generator

tag = TagFactory()
