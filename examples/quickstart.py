"""Quickstart example for hashtaglex.

This example demonstrates scanning, unescaping and creating hashtags.

Note: Example 5 needs the babel extra (pip install hashtaglex[babel]).
"""

from hashtaglex import (
    DOUBLING_CONFIG,
    HashtagConfig,
    HashtagPattern,
    HashtagSynthesisError,
    create_hashtag,
    find_all,
    find_first,
)

# Example 1: Find hashtags
print("=" * 50)
print("Example 1: Find Hashtags")
print("=" * 50)

post = "Shipping #release-2.0 today! Notes: #<release notes>. Not a tag: \\#nope"
for match in find_all(post):
    print(f"{match.type:>9} {match.span} {match.raw!r} -> {match.text!r}")
# Output:
# unwrapped (9, 21) '#release-2.0' -> 'release-2.0'
#   wrapped (36, 52) '#<release notes>' -> 'release notes'

# Example 2: Trailing punctuation
print("\n" + "=" * 50)
print("Example 2: Trailing Punctuation")
print("=" * 50)

text = "This is #awesome!! Right?"
print(find_first(text).text)  # type: ignore[union-attr]
# Output: awesome
print(find_first(text, config=DOUBLING_CONFIG).text)  # type: ignore[union-attr]
# Output: awesome!

# Example 3: Create hashtags that scan back to their text
print("\n" + "=" * 50)
print("Example 3: Create Hashtags")
print("=" * 50)

for tag in ["foo", "foo#bar", "foo.", "foo bar", "a <b> c"]:
    created = create_hashtag(tag)
    print(f"{tag!r:>12} -> {created}")
# Output:
#        'foo' -> #foo
#    'foo#bar' -> #foo\#bar
#       'foo.' -> #foo\.
#    'foo bar' -> #<foo bar>
#    'a <b> c' -> #<a \<b\> c>

try:
    create_hashtag("", strict=True)
except HashtagSynthesisError as e:
    print(e)
# Output:
# error[SYNTHESIS_EMPTY_TEXT]: Cannot create a hashtag from empty text
#   = help: Hashtag text must contain at least one character

# Example 4: Cursor-based matching
print("\n" + "=" * 50)
print("Example 4: HashtagPattern")
print("=" * 50)

pattern = HashtagPattern(global_=True, capture="text")
while (result := pattern.exec("#one #<two words> #three")) is not None:
    print(result.index, list(result), pattern.last_index)
# Output:
# 0 ['#one', 'one', 'unwrapped'] 4
# 5 ['#<two words>', 'two words', 'wrapped'] 17
# 18 ['#three', 'three', 'unwrapped'] 24

# Example 5: Locale-aware punctuation
print("\n" + "=" * 50)
print("Example 5: Locale Punctuation")
print("=" * 50)

zh = HashtagConfig.for_locale("zh-CN")
print(find_first("#标签。后面", config=zh).text)  # type: ignore[union-attr]
# Output: 标签
