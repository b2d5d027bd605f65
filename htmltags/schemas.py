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
This module defines the voluptuous schemas used to check the arguments passed
to :class:`~htmltags.tag.TagNode` methods, along with the :func:`validate`
helper which translates schema failures into
:exc:`~htmltags.tag.InvalidArgument` errors.

.. autofunction:: validate
"""

from voluptuous import Schema, All, Any, Length, Range, Invalid


class InvalidArgument(ValueError):
    """
    Raised when a :class:`~htmltags.tag.TagNode` method is passed an argument
    it cannot accept (an empty name, a non-boolean flag, etc). The node is
    left unchanged.
    """


# A tag-type, attribute name, or class name; must be a non-empty str
name = Schema(All(str, Length(min=1)))

# Attribute values may be empty, but must be str
value = Schema(str)

flag = Schema(bool)

optional_flag = Schema(Any(bool, None))

prefix = Schema(str)

def _not_bool(data):
    # bool is a sub-class of int, so All(int, ...) alone would accept it
    if isinstance(data, bool):
        raise Invalid('expected int')
    return data


indent_level = Schema(All(int, _not_bool, Range(min=0)))


def validate(schema, data, msg):
    """
    Validate *data* against *schema*, returning the (possibly coerced) result.
    If validation fails, :exc:`InvalidArgument` is raised with *msg* as the
    prefix of its message.
    """
    try:
        return schema(data)
    except Invalid as exc:
        raise InvalidArgument('%s: %s' % (msg, exc)) from exc
