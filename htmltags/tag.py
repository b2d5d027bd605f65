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
Defines the :class:`TagNode` class which represents a single HTML element
along with its attributes and content. Content may be text or further
:class:`TagNode` instances, permitting whole trees of elements to be
assembled and then rendered with :meth:`TagNode.render`.

.. autoclass:: TagNode
    :members:

.. autoexception:: InvalidArgument

.. autoexception:: InvalidContent
"""

import re
import logging

from voluptuous import Schema, Any

from . import schemas
from .const import VOID_ELEMENTS, DEFAULT_TAG_PREFIX
from .html import escape, literal
from .schemas import validate, InvalidArgument


logger = logging.getLogger('htmltags.tag')

_WHITESPACE = re.compile(r'\s+')


def _collapse(s):
    return _WHITESPACE.sub(' ', s).strip()


def _tokens(s):
    # Never yields an empty token, even for whitespace-only strings
    return _collapse(s).split(' ') if s.strip() else []


class InvalidContent(TypeError):
    """
    Raised during rendering when a node's content contains something other
    than a str or :class:`TagNode`. This can only happen if the content list
    was manipulated directly rather than via :meth:`TagNode.append_content`
    or :meth:`TagNode.prepend_content`.
    """


class TagNode:
    """
    Represents a single HTML element of type *tag_type* (e.g. "div", "img").

    Attributes are stored (lower-cased) in insertion order and content is an
    ordered list of strings and nested :class:`TagNode` instances. Mutating
    methods return the node itself so calls may be chained::

        >>> div = TagNode('div').set_attribute('id', 'main').add_class('box')
        >>> div = div.append_content('Hello')
        >>> str(div)
        '<div id="main" class="box">Hello</div>'

    :param str tag_type:
        The element name. Stored lower-cased.

    :param bool closing_tag:
        Whether a closing tag is rendered. If omitted (or :data:`None`) this
        is :data:`False` for HTML4 void elements like "img" and "meta", and
        :data:`True` otherwise.

    :param bool xhtml_encoding:
        If :data:`True`, elements without a closing tag are rendered in
        self-closing form (``<br />``) instead of plain ``<br>``.

    :param str tag_prefix:
        The string repeated once per level of nesting to indent rendered
        children. Defaults to a single tab. When a tree is rendered, the
        prefix of the node :meth:`render` is called upon is used for the
        entire tree.
    """
    def __init__(self, tag_type, closing_tag=None, xhtml_encoding=False,
                 tag_prefix=DEFAULT_TAG_PREFIX):
        tag_type = validate(schemas.name, tag_type, 'invalid tag type')
        closing_tag = validate(schemas.optional_flag, closing_tag,
                               'invalid closing tag flag')
        xhtml_encoding = validate(schemas.flag, xhtml_encoding,
                                  'invalid XHTML encoding flag')
        self._tag_type = tag_type.lower()
        if closing_tag is None:
            closing_tag = self._tag_type not in VOID_ELEMENTS
        self._closing_tag = closing_tag
        self._xhtml_encoding = xhtml_encoding
        self._attributes = {}
        self._content = []
        self.tag_prefix = tag_prefix

    def __repr__(self):
        return '<TagNode tag_type=%r attributes=%d content=%d>' % (
            self._tag_type, len(self._attributes), len(self._content))

    def __str__(self):
        return self.render()

    def __html__(self):
        return literal(self.render())

    @property
    def tag_type(self):
        """
        The (lower-cased) element name, e.g. "div". Read-only.
        """
        return self._tag_type

    @property
    def tag_prefix(self):
        """
        The indentation unit used when this node is rendered.
        """
        return self._tag_prefix

    @tag_prefix.setter
    def tag_prefix(self, value):
        self._tag_prefix = validate(schemas.prefix, value, 'invalid tag prefix')

    # Attributes ##############################################################

    def set_attribute(self, name, value):
        """
        Set the attribute *name* (case-insensitive) to *value*, replacing any
        existing value. The value is stored verbatim; escaping happens at
        render time.
        """
        name = validate(schemas.name, name, 'invalid attribute name')
        value = validate(schemas.value, value, 'invalid attribute value')
        self._attributes[name.lower()] = value
        return self

    def get_attribute(self, name):
        """
        Return the value of the attribute *name* (case-insensitive), or
        :data:`None` if it is not set.
        """
        name = validate(schemas.name, name, 'invalid attribute name')
        return self._attributes.get(name.lower())

    def remove_attribute(self, name):
        name = validate(schemas.name, name, 'invalid attribute name')
        self._attributes.pop(name.lower(), None)
        return self

    def has_attribute(self, name):
        name = validate(schemas.name, name, 'invalid attribute name')
        return name.lower() in self._attributes

    def list_attributes(self):
        "Return the ordered mapping of attribute names to values"
        return self._attributes

    def get_formatted_attributes(self):
        """
        Return the attributes formatted for inclusion in an opening tag, e.g.
        ``' id="main" class="box"'``. Each pair is preceded by a single space.
        """
        return ''.join(
            ' %s="%s"' % (escape(key), escape(value))
            for key, value in self._attributes.items()
        )

    # Classes #################################################################

    def get_classes(self):
        """
        Return the value of the "class" attribute with whitespace normalized,
        or an empty string if no classes are set.
        """
        return _collapse(self._attributes.get('class', ''))

    def has_class(self, name):
        """
        Return :data:`True` if *name* is one of the node's classes (ignoring
        case). If *name* contains whitespace, every class within it must be
        present.
        """
        name = validate(schemas.name, name, 'invalid class name')
        wanted = _tokens(name)
        classes = {token.lower() for token in self.get_classes().split(' ')}
        return bool(wanted) and all(
            token.lower() in classes for token in wanted)

    def add_class(self, name):
        """
        Add *name* to the node's classes, unless it is already present
        (ignoring case). A *name* containing whitespace adds each class
        within it that isn't already present.
        """
        name = validate(schemas.name, name, 'invalid class name')
        for token in _tokens(name):
            if not self.has_class(token):
                self._attributes['class'] = (
                    self.get_classes() + ' ' + token).strip()
        return self

    def remove_class(self, name):
        """
        Remove every class matching *name* (ignoring case), leaving the
        remaining classes in their original order. A *name* containing
        whitespace removes each class within it.
        """
        name = validate(schemas.name, name, 'invalid class name')
        unwanted = {token.lower() for token in _tokens(name)}
        tokens = self.get_classes().split(' ')
        self.clear_classes()
        for token in tokens:
            if token.lower() in unwanted or not token.strip():
                continue
            self.add_class(token)
        return self

    def clear_classes(self):
        self._attributes.pop('class', None)
        return self

    # Content #################################################################

    def append_content(self, item):
        """
        Add *item* (a str or :class:`TagNode`) to the end of the node's
        content. This implicitly enables the closing tag.
        """
        item = validate(_content_item, item,
                        'only tags and strings are allowed as content')
        self._content.append(item)
        self._closing_tag = True
        return self

    def prepend_content(self, item):
        """
        Add *item* (a str or :class:`TagNode`) to the start of the node's
        content. This implicitly enables the closing tag.
        """
        item = validate(_content_item, item,
                        'only tags and strings are allowed as content')
        self._content.insert(0, item)
        self._closing_tag = True
        return self

    def clear_content(self):
        "Remove all content. The closing tag setting is left unchanged."
        self._content = []
        return self

    def get_content(self):
        return self._content

    # Flags ###################################################################

    def get_closing_tag(self):
        return self._closing_tag

    def set_closing_tag(self, value):
        self._closing_tag = validate(schemas.flag, value,
                                     'invalid closing tag flag')
        return self

    def get_xhtml_encoding(self):
        return self._xhtml_encoding

    def set_xhtml_encoding(self, value):
        self._xhtml_encoding = validate(schemas.flag, value,
                                        'invalid XHTML encoding flag')
        return self

    # Rendering ###############################################################

    def render(self, indent_level=0):
        """
        Render the node and its content to a string of markup, indented by
        *indent_level* repetitions of :attr:`tag_prefix`.

        Text content is placed inline with the tags when it is the only
        content item; otherwise every item is placed on a new line, one level
        deeper than the node itself, and the closing tag gets a line of its
        own. A node whose only content is a nested tag places the child on
        its own line and leaves the closing tag on the line after it.

        :raises InvalidContent:
            If the content list contains anything other than strings and
            :class:`TagNode` instances.
        """
        indent_level = validate(schemas.indent_level, indent_level,
                                'invalid indent level')
        logger.debug('rendering <%s> at level %d', self._tag_type, indent_level)
        return self._render(self._tag_prefix, indent_level)

    def _render(self, prefix, level):
        # The prefix of the outermost node is threaded through the whole tree;
        # depth is driven solely by level
        count = len(self._content)
        result = '%s<%s%s%s>' % (
            prefix * level,
            self._tag_type,
            self.get_formatted_attributes(),
            ' /' if self._xhtml_encoding and not self._closing_tag else '',
        )
        for index, item in enumerate(self._content):
            if isinstance(item, TagNode):
                result += '\n' + item._render(prefix, level + 1)
                if count == 1 and index == 0:
                    result += '\n'
            elif isinstance(item, str):
                if count > 1:
                    result += '\n' + prefix * (level + 1)
                if hasattr(item, '__html__'):
                    result += item.__html__()
                else:
                    result += escape(item)
            else:
                logger.error('invalid content in <%s>: %r',
                             self._tag_type, item)
                raise InvalidContent(
                    'only tags and strings are allowed as content, not %r' %
                    (item,))
        if self._closing_tag:
            if count > 1:
                result += '\n' + prefix * level
            result += '</%s>' % self._tag_type
        return result


_content_item = Schema(Any(str, TagNode))
