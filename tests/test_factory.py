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


import pytest

from htmltags.tag import TagNode, InvalidArgument
from htmltags.factory import tag, TagFactory


def test_tag_basics():
    tag = TagFactory()
    assert isinstance(tag.a(), TagNode)
    assert str(tag.a()) == '<a></a>'
    assert str(tag.br()) == '<br>'
    assert str(tag.foo()) == '<foo></foo>'
    assert str(tag.FOO()) == '<foo></foo>'


def test_tag_module_instance():
    assert isinstance(tag, TagFactory)
    assert str(tag.p('x')) == '<p>x</p>'


def test_tag_generator_cached():
    tag = TagFactory()
    assert tag.div is tag.div


def test_tag_no_dunder_magic():
    tag = TagFactory()
    assert not hasattr(tag, '__html__')


def test_html_tag_attrs():
    tag = TagFactory()
    assert str(tag.foo(bar='baz')) == '<foo bar="baz"></foo>'
    assert str(tag.foo(bar=101)) == '<foo bar="101"></foo>'
    assert str(tag.foo(bar=True)) == '<foo bar="bar"></foo>'
    assert str(tag.foo(bar=False)) == '<foo></foo>'
    assert str(tag.foo(bar=None)) == '<foo></foo>'
    assert str(tag.br(foo='bar')) == '<br foo="bar">'
    assert str(tag.foo(bar=b'baz')) == '<foo bar="baz"></foo>'
    assert str(tag.br(foo=b'm\xc2\xb5')) == '<br foo="mµ">'


def test_xhtml_tag_attrs():
    tag = TagFactory(xhtml=True)
    assert str(tag.foo(bar='baz')) == '<foo bar="baz"></foo>'
    assert str(tag.br(foo='bar')) == '<br foo="bar" />'
    assert str(tag.br(foo=b'm\xc2\xb5')) == '<br foo="mµ" />'
    assert tag.hr().get_xhtml_encoding()


def test_tag_reserved_names():
    assert str(tag.del_('x')) == '<del>x</del>'
    assert str(tag.label(for_='name', class_='big')) == (
        '<label for="name" class="big"></label>')
    assert str(tag.div(data_role='main')) == '<div data-role="main"></div>'


def test_tag_close():
    assert str(tag.div(_close=False)) == '<div>'
    assert str(tag.br(_close=True)) == '<br></br>'
    assert str(TagFactory(xhtml=True).div(_close=False)) == '<div />'


def test_tag_contents():
    assert str(tag.foo(tag.bar('baz'))) == '<foo>\n\t<bar>baz</bar>\n</foo>'
    assert str(tag.foo('bar', 'baz')) == '<foo>\n\tbar\n\tbaz\n</foo>'
    assert str(tag.foo(1, 2)) == '<foo>\n\t1\n\t2\n</foo>'
    assert str(tag.foo(b'bar')) == '<foo>bar</foo>'
    assert str(tag.foo('<&>')) == '<foo>&lt;&amp;&gt;</foo>'


def test_tag_contents_flattened():
    items = tag.ul([tag.li('a'), tag.li('b')])
    assert len(items.get_content()) == 2
    assert str(items) == '<ul>\n\t<li>a</li>\n\t<li>b</li>\n</ul>'
    rows = tag.ul(tag.li(s) for s in 'xy')
    assert str(rows) == '<ul>\n\t<li>x</li>\n\t<li>y</li>\n</ul>'


def test_tag_content_enables_closing():
    assert str(tag.img('alt text')) == '<img>alt text</img>'
    assert str(tag.br('x', _close=False)) == '<br>x</br>'


def test_tag_prefix():
    tag = TagFactory(tag_prefix='  ')
    assert str(tag.ul(tag.li('a'), tag.li('b'))) == (
        '<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>')


def test_tag_matches_hand_built():
    built = TagNode('div').set_attribute('id', 'main').add_class('box')
    built.append_content(TagNode('span').append_content('hi'))
    built.append_content('tail')
    made = tag.div(tag.span('hi'), 'tail', id='main', class_='box')
    assert made.render() == built.render()
    assert made.list_attributes() == built.list_attributes()


def test_tag_attr_iterables():
    assert str(tag.foo(bar=range(5))) == '<foo bar="01234"></foo>'
    assert str(tag.foo(bar=['a', b'b', 3])) == '<foo bar="ab3"></foo>'
    assert str(tag.foo(bar=[])) == '<foo bar=""></foo>'


def test_tag_factory_invalid():
    with pytest.raises(InvalidArgument):
        TagFactory(xhtml='yes')
    with pytest.raises(InvalidArgument):
        TagFactory(xhtml=1)
    with pytest.raises(InvalidArgument):
        TagFactory(tag_prefix=None)
