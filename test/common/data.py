# This file is part of EmojiKit.
#
# SPDX-License-Identifier: GPL-3.0-only

EMOJI_TEST = '''\
# emoji-test.txt
# Date: 2022-08-12, 20:24:39 GMT
# Version: 15.0
#
# Format:
#   code points; status # emoji name
#     Code points - list of one or more hex code points, separated by spaces
#     Status
#       component           - an Emoji_Component,
#       fully-qualified     - a fully-qualified emoji (see ED-18 in UTS #51),
#       minimally-qualified - a minimally-qualified emoji (see ED-18a in UTS #51)
#       unqualified         - a unqualified emoji (See ED-19 in UTS #51)

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # E1.0 grinning face
263A FE0F                                              ; fully-qualified     # E0.6 smiling face
263A                                                   ; unqualified         # E0.6 smiling face
1F636 200D 1F32B FE0F                                  ; fully-qualified     # E13.1 face in clouds
1F636 200D 1F32B                                       ; minimally-qualified # E13.1 face in clouds

# Smileys & Emotion subtotal:		4
# Smileys & Emotion subtotal:		4	w/o modifiers

# group: People & Body

# subgroup: hand-fingers-closed
1F44D                                                  ; fully-qualified     # E0.6 thumbs up
1F44D 1F3FB                                            ; fully-qualified     # E1.0 thumbs up: light skin tone
1F44D 1F3FF                                            ; fully-qualified     # E1.0 thumbs up: dark skin tone
261D FE0F                                              ; fully-qualified     # E0.6 index pointing up
261D                                                   ; unqualified         # E0.6 index pointing up
261D 1F3FB                                             ; fully-qualified     # E1.0 index pointing up: light skin tone

# subgroup: hands
1F91D                                                  ; fully-qualified     # E3.0 handshake
1FAF1 1F3FB 200D 1FAF2 1F3FC                           ; fully-qualified     # E14.0 handshake: light skin tone, medium-light skin tone
1FAF1 1F3FF 200D 1FAF2 1F3FB                           ; fully-qualified     # E14.0 handshake: dark skin tone, light skin tone

# subgroup: family
1F48F                                                  ; fully-qualified     # E0.6 kiss
1F9D1 1F3FB 200D 2764 FE0F 200D 1F48B 200D 1F9D1 1F3FC ; fully-qualified     # E13.1 kiss: person, person, light skin tone, medium-light skin tone
1F9D1 1F3FB 200D 2764 200D 1F48B 200D 1F9D1 1F3FC      ; minimally-qualified # E13.1 kiss: person, person, light skin tone, medium-light skin tone

# group: Component

# subgroup: skin-tone
1F3FB                                                  ; component           # E1.0 light skin tone
1F3FF                                                  ; component           # E1.0 dark skin tone

# group: Animals & Nature
1F436                                                  ; fully-qualified     # E0.6 dog face

# group: Flags
1F3C1                                                  ; fully-qualified     # E0.6 chequered flag
1F3F3 FE0F 200D 1F308                                  ; fully-qualified     # E4.0 rainbow flag
1F3F3 200D 1F308                                       ; unqualified         # E4.0 rainbow flag

# Status Counts
# fully-qualified : 16
# minimally-qualified : 2
# unqualified : 3
# component : 2

#EOF
'''

EMOJI_COUNTS = '''\
<!DOCTYPE html>
<html>
<head><title>Emoji Counts, v15.0</title></head>
<body>
<h1>Emoji Counts, v15.0</h1>
<table border="1">
<tbody>
<tr><th>Category</th><th><a href="#smileys">Smileys &amp; Emotion</a></th><th>People &amp; Body</th><th>Component</th><th>Animals &amp; Nature</th><th>Food &amp; Drink</th><th>Travel &amp; Places</th><th>Activities</th><th>Objects</th><th>Symbols</th><th>Flags</th><th>All</th></tr>
<tr><td>face-smiling</td><td>3</td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td></td><td>3</td></tr>
<tr><th>Total</th><th>3</th><th>10</th><th>2</th><th>1</th><th>0</th><th>0</th><th>0</th><th>0</th><th>0</th><th>2</th><th>18</th></tr>
</tbody>
</table>
<table>
<tr><th>Other</th><th>Smileys &amp; Emotion</th><th>All</th></tr>
<tr><th>Total</th><th>999</th><th>999</th></tr>
</table>
</body>
</html>
'''

ANNOTATIONS_EN = '''<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE ldml SYSTEM "../../common/dtd/ldml.dtd">
<ldml>
    <annotations>
        <annotation cp="\U0001F600">face | grin | grinning face</annotation>
        <annotation cp="\U0001F600" type="tts">grinning face</annotation>
        <annotation cp="\u263A">face | outlined | relaxed | smile | smiling face</annotation>
        <annotation cp="\U0001F44D">+1 | hand | thumb | thumbs up | up</annotation>
        <annotation cp="\U0001F91D">agreement | hand | handshake | meeting | shake</annotation>
        <annotation cp="\U0001F436">dog | face | pet</annotation>
    </annotations>
</ldml>
'''

ANNOTATIONS_DERIVED_EN = '''<?xml version="1.0" encoding="UTF-8" ?>
<ldml>
    <annotations>
        <annotation cp="\U0001F44D\U0001F3FB">+1 | hand | light skin tone | thumb | thumbs up | up</annotation>
        <annotation cp="\U0001F44D\U0001F3FB" type="tts">thumbs up: light skin tone</annotation>
    </annotations>
</ldml>
'''
