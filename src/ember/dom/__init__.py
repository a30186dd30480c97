from ember.dom.tags import *  # noqa: F403
from ember.dom.tags import TAGS, define_self_closing_tag, define_tag
