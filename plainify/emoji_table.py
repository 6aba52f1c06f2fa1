"""The emoji sequences recognised in Markdown files and their shortcodes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class EmojiEntry:
    """An emoji character sequence and its :shortcode: replacement."""

    seq: str
    code: str


# Multi-codepoint variants (e.g. with U+FE0F) are listed next to their base form.
_RAW_EMOJI: tuple[tuple[str, str], ...] = (
    # Smileys & People
    ("\U0001F600", ":grinning:"),
    ("\U0001F603", ":smiley:"),
    ("\U0001F604", ":smile:"),
    ("\U0001F601", ":grin:"),
    ("\U0001F606", ":laughing:"),
    ("\U0001F605", ":sweat_smile:"),
    ("\U0001F602", ":joy:"),
    ("\U0001F923", ":rofl:"),
    ("\U0001F60A", ":blush:"),
    ("\U0001F607", ":innocent:"),
    ("\U0001F609", ":wink:"),
    ("\U0001F60E", ":sunglasses:"),
    ("\U0001F914", ":thinking:"),
    ("\U0001F928", ":raised_eyebrow:"),
    ("\U0001F610", ":neutral_face:"),
    ("\U0001F611", ":expressionless:"),
    ("\U0001F636", ":no_mouth:"),
    ("\U0001F644", ":roll_eyes:"),
    ("\U0001F62C", ":grimacing:"),
    ("\U0001F925", ":lying_face:"),
    ("\U0001F60C", ":relieved:"),
    ("\U0001F614", ":pensive:"),
    ("\U0001F62A", ":sleepy:"),
    ("\U0001F634", ":sleeping:"),
    ("\U0001F637", ":mask:"),
    ("\U0001F912", ":face_with_thermometer:"),
    ("\U0001F915", ":head_bandage:"),
    ("\U0001F922", ":nauseated_face:"),
    ("\U0001F92E", ":vomiting_face:"),
    ("\U0001F927", ":sneezing_face:"),
    ("\U0001F975", ":hot_face:"),
    ("\U0001F976", ":cold_face:"),
    ("\U0001F974", ":woozy_face:"),
    ("\U0001F635", ":dizzy_face:"),
    ("\U0001F92F", ":exploding_head:"),
    ("\U0001F920", ":cowboy_hat_face:"),
    ("\U0001F973", ":partying_face:"),
    ("\U0001F60D", ":heart_eyes:"),
    ("\U0001F929", ":star_struck:"),
    ("\U0001F618", ":kissing_heart:"),
    ("\U0001F61C", ":stuck_out_tongue_winking_eye:"),
    ("\U0001F92A", ":zany_face:"),
    ("\U0001F913", ":nerd_face:"),
    ("\U0001F9D0", ":monocle_face:"),
    ("\U0001F615", ":confused:"),
    ("\U0001F61F", ":worried:"),
    ("\U0001F641", ":slightly_frowning_face:"),
    ("\U0001F62E", ":open_mouth:"),
    ("\U0001F632", ":astonished:"),
    ("\U0001F633", ":flushed:"),
    ("\U0001F628", ":fearful:"),
    ("\U0001F630", ":cold_sweat:"),
    ("\U0001F625", ":disappointed_relieved:"),
    ("\U0001F622", ":cry:"),
    ("\U0001F62D", ":sob:"),
    ("\U0001F631", ":scream:"),
    ("\U0001F616", ":confounded:"),
    ("\U0001F623", ":persevere:"),
    ("\U0001F61E", ":disappointed:"),
    ("\U0001F613", ":sweat:"),
    ("\U0001F629", ":weary:"),
    ("\U0001F62B", ":tired_face:"),
    ("\U0001F624", ":triumph:"),
    ("\U0001F621", ":rage:"),
    ("\U0001F620", ":angry:"),
    ("\U0001F92C", ":cursing_face:"),
    ("\U0001F608", ":smiling_imp:"),
    ("\U0001F47F", ":imp:"),
    ("\U0001F480", ":skull:"),
    ("\U0001F4A9", ":poop:"),
    ("\U0001F921", ":clown_face:"),
    ("\U0001F47B", ":ghost:"),
    ("\U0001F47D", ":alien:"),
    ("\U0001F916", ":robot:"),
    # Gestures
    ("\U0001F44D", ":thumbsup:"),
    ("\U0001F44E", ":thumbsdown:"),
    ("\U0001F44F", ":clap:"),
    ("\U0001F64F", ":pray:"),
    ("\U0001F4AA", ":muscle:"),
    ("\U0001F91D", ":handshake:"),
    ("\u270C\uFE0F", ":v:"),
    ("\u270C", ":v:"),
    ("\U0001F44B", ":wave:"),
    ("\U0001F44C", ":ok_hand:"),
    ("\U0001F448", ":point_left:"),
    ("\U0001F449", ":point_right:"),
    ("\U0001F446", ":point_up_2:"),
    ("\U0001F447", ":point_down:"),
    ("\u261D\uFE0F", ":point_up:"),
    ("\u261D", ":point_up:"),
    ("\U0001F919", ":call_me_hand:"),
    ("\U0001F918", ":metal:"),
    ("\U0001F91F", ":love_you_gesture:"),
    ("\U0001F590\uFE0F", ":raised_hand_with_fingers_splayed:"),
    ("\U0001F590", ":raised_hand_with_fingers_splayed:"),
    ("\u270B", ":hand:"),
    ("\U0001F596", ":vulcan_salute:"),
    ("\U0001F91A", ":raised_back_of_hand:"),
    ("\U0001F91E", ":crossed_fingers:"),
    ("\U0001F44A", ":fist_oncoming:"),
    ("\u270A", ":fist_raised:"),
    ("\U0001F91B", ":fist_left:"),
    ("\U0001F91C", ":fist_right:"),
    # Hearts & Emotions
    ("\u2764\uFE0F", ":heart:"),
    ("\u2764", ":heart:"),
    ("\U0001F49B", ":yellow_heart:"),
    ("\U0001F49A", ":green_heart:"),
    ("\U0001F499", ":blue_heart:"),
    ("\U0001F49C", ":purple_heart:"),
    ("\U0001F5A4", ":black_heart:"),
    ("\U0001F494", ":broken_heart:"),
    ("\U0001F495", ":two_hearts:"),
    ("\U0001F496", ":sparkling_heart:"),
    ("\U0001F497", ":heartpulse:"),
    ("\U0001F498", ":cupid:"),
    ("\U0001F49D", ":gift_heart:"),
    ("\U0001F49E", ":revolving_hearts:"),
    ("\U0001F4AF", ":100:"),
    ("\U0001F4A5", ":boom:"),
    ("\U0001F4AB", ":dizzy:"),
    ("\U0001F4A2", ":anger:"),
    ("\U0001F4A6", ":sweat_drops:"),
    ("\U0001F4A8", ":dash:"),
    ("\U0001F4A3", ":bomb:"),
    ("\U0001F4AC", ":speech_balloon:"),
    ("\U0001F4AD", ":thought_balloon:"),
    ("\U0001F4A4", ":zzz:"),
    # Status symbols
    ("\u2705", ":white_check_mark:"),
    ("\u274C", ":x:"),
    ("\u274E", ":negative_squared_cross_mark:"),
    ("\u2757", ":exclamation:"),
    ("\u2753", ":question:"),
    ("\u2755", ":grey_exclamation:"),
    ("\u2754", ":grey_question:"),
    ("\u203C\uFE0F", ":bangbang:"),
    ("\u203C", ":bangbang:"),
    ("\u2049\uFE0F", ":interrobang:"),
    ("\u2049", ":interrobang:"),
    ("\U0001F534", ":red_circle:"),
    ("\U0001F7E0", ":orange_circle:"),
    ("\U0001F7E1", ":yellow_circle:"),
    ("\U0001F7E2", ":green_circle:"),
    ("\U0001F535", ":large_blue_circle:"),
    ("\U0001F7E3", ":purple_circle:"),
    ("\U0001F7E4", ":brown_circle:"),
    ("\u26AB", ":black_circle:"),
    ("\u26AA", ":white_circle:"),
    ("\U0001F7E5", ":red_square:"),
    ("\U0001F7E7", ":orange_square:"),
    ("\U0001F7E8", ":yellow_square:"),
    ("\U0001F7E9", ":green_square:"),
    ("\U0001F7E6", ":blue_square:"),
    ("\U0001F7EA", ":purple_square:"),
    ("\U0001F7EB", ":brown_square:"),
    ("\u2B1B", ":black_large_square:"),
    ("\u2B1C", ":white_large_square:"),
    ("\u25FC\uFE0F", ":black_medium_square:"),
    ("\u25FC", ":black_medium_square:"),
    ("\u25FB\uFE0F", ":white_medium_square:"),
    ("\u25FB", ":white_medium_square:"),
    ("\u25FE", ":black_medium_small_square:"),
    ("\u25FD", ":white_medium_small_square:"),
    ("\u25AA\uFE0F", ":black_small_square:"),
    ("\u25AA", ":black_small_square:"),
    ("\u25AB\uFE0F", ":white_small_square:"),
    ("\u25AB", ":white_small_square:"),
    ("\U0001F538", ":small_orange_diamond:"),
    ("\U0001F539", ":small_blue_diamond:"),
    ("\U0001F536", ":large_orange_diamond:"),
    ("\U0001F537", ":large_blue_diamond:"),
    ("\U0001F53A", ":small_red_triangle:"),
    ("\U0001F53B", ":small_red_triangle_down:"),
    ("\U0001F4A0", ":diamond_shape_with_a_dot_inside:"),
    # Arrows & indicators
    ("\u2B06\uFE0F", ":arrow_up:"),
    ("\u2B06", ":arrow_up:"),
    ("\u2B07\uFE0F", ":arrow_down:"),
    ("\u2B07", ":arrow_down:"),
    ("\u27A1\uFE0F", ":arrow_right:"),
    ("\u27A1", ":arrow_right:"),
    ("\u2B05\uFE0F", ":arrow_left:"),
    ("\u2B05", ":arrow_left:"),
    ("\u2197\uFE0F", ":arrow_upper_right:"),
    ("\u2197", ":arrow_upper_right:"),
    ("\u2198\uFE0F", ":arrow_lower_right:"),
    ("\u2198", ":arrow_lower_right:"),
    ("\u2199\uFE0F", ":arrow_lower_left:"),
    ("\u2199", ":arrow_lower_left:"),
    ("\u2196\uFE0F", ":arrow_upper_left:"),
    ("\u2196", ":arrow_upper_left:"),
    ("\u2194\uFE0F", ":left_right_arrow:"),
    ("\u2194", ":left_right_arrow:"),
    ("\u2195\uFE0F", ":arrow_up_down:"),
    ("\u2195", ":arrow_up_down:"),
    ("\u21A9\uFE0F", ":leftwards_arrow_with_hook:"),
    ("\u21A9", ":leftwards_arrow_with_hook:"),
    ("\u21AA\uFE0F", ":arrow_right_hook:"),
    ("\u21AA", ":arrow_right_hook:"),
    ("\U0001F503", ":arrows_clockwise:"),
    ("\U0001F504", ":arrows_counterclockwise:"),
    # Objects (docs & office)
    ("\U0001F4DD", ":memo:"),
    ("\U0001F4CB", ":clipboard:"),
    ("\U0001F4CC", ":pushpin:"),
    ("\U0001F4CD", ":round_pushpin:"),
    ("\U0001F4CE", ":paperclip:"),
    ("\U0001F587\uFE0F", ":paperclips:"),
    ("\U0001F587", ":paperclips:"),
    ("\U0001F4CF", ":straight_ruler:"),
    ("\U0001F4D0", ":triangular_ruler:"),
    ("\U0001F4D6", ":book:"),
    ("\U0001F4D7", ":green_book:"),
    ("\U0001F4D8", ":blue_book:"),
    ("\U0001F4D9", ":orange_book:"),
    ("\U0001F4DA", ":books:"),
    ("\U0001F4D3", ":notebook:"),
    ("\U0001F4D2", ":ledger:"),
    ("\U0001F4C3", ":page_with_curl:"),
    ("\U0001F4C4", ":page_facing_up:"),
    ("\U0001F4F0", ":newspaper:"),
    ("\U0001F5DE\uFE0F", ":newspaper_roll:"),
    ("\U0001F5DE", ":newspaper_roll:"),
    ("\U0001F516", ":bookmark:"),
    ("\U0001F3F7\uFE0F", ":label:"),
    ("\U0001F3F7", ":label:"),
    ("\U0001F4E6", ":package:"),
    ("\U0001F4E7", ":e-mail:"),
    ("\U0001F4E8", ":incoming_envelope:"),
    ("\U0001F4E9", ":envelope_with_arrow:"),
    ("\U0001F4EB", ":mailbox:"),
    ("\U0001F4EA", ":mailbox_closed:"),
    ("\U0001F4EC", ":mailbox_with_mail:"),
    ("\U0001F4ED", ":mailbox_with_no_mail:"),
    ("\u2709\uFE0F", ":email:"),
    ("\u2709", ":email:"),
    ("\u270F\uFE0F", ":pencil2:"),
    ("\u270F", ":pencil2:"),
    ("\U0001F58A\uFE0F", ":pen:"),
    ("\U0001F58A", ":pen:"),
    ("\U0001F58B\uFE0F", ":fountain_pen:"),
    ("\U0001F58B", ":fountain_pen:"),
    ("\U0001F58C\uFE0F", ":paintbrush:"),
    ("\U0001F58C", ":paintbrush:"),
    ("\U0001F58D\uFE0F", ":crayon:"),
    ("\U0001F58D", ":crayon:"),
    ("\u2702\uFE0F", ":scissors:"),
    ("\u2702", ":scissors:"),
    ("\U0001F4C1", ":file_folder:"),
    ("\U0001F4C2", ":open_file_folder:"),
    ("\U0001F5C2\uFE0F", ":card_index_dividers:"),
    ("\U0001F5C2", ":card_index_dividers:"),
    ("\U0001F5C3\uFE0F", ":card_file_box:"),
    ("\U0001F5C3", ":card_file_box:"),
    ("\U0001F5C4\uFE0F", ":file_cabinet:"),
    ("\U0001F5C4", ":file_cabinet:"),
    ("\U0001F5D1\uFE0F", ":wastebasket:"),
    ("\U0001F5D1", ":wastebasket:"),
    ("\U0001F4CA", ":bar_chart:"),
    ("\U0001F4C8", ":chart_with_upwards_trend:"),
    ("\U0001F4C9", ":chart_with_downwards_trend:"),
    ("\U0001F4C7", ":card_index:"),
    ("\U0001F4D1", ":bookmark_tabs:"),
    # Tech & development
    ("\U0001F4BB", ":computer:"),
    ("\U0001F5A5\uFE0F", ":desktop_computer:"),
    ("\U0001F5A5", ":desktop_computer:"),
    ("\U0001F5A8\uFE0F", ":printer:"),
    ("\U0001F5A8", ":printer:"),
    ("\u2328\uFE0F", ":keyboard:"),
    ("\u2328", ":keyboard:"),
    ("\U0001F5B1\uFE0F", ":computer_mouse:"),
    ("\U0001F5B1", ":computer_mouse:"),
    ("\U0001F4BD", ":minidisc:"),
    ("\U0001F4BE", ":floppy_disk:"),
    ("\U0001F4BF", ":cd:"),
    ("\U0001F4C0", ":dvd:"),
    ("\U0001F50C", ":electric_plug:"),
    ("\U0001F50B", ":battery:"),
    ("\U0001F50E", ":mag_right:"),
    ("\U0001F50D", ":mag:"),
    ("\U0001F4F1", ":iphone:"),
    ("\U0001F4F2", ":calling:"),
    ("\u260E\uFE0F", ":phone:"),
    ("\u260E", ":phone:"),
    ("\U0001F4DE", ":telephone_receiver:"),
    ("\U0001F50A", ":loud_sound:"),
    ("\U0001F509", ":sound:"),
    ("\U0001F508", ":speaker:"),
    ("\U0001F507", ":mute:"),
    ("\U0001F514", ":bell:"),
    ("\U0001F515", ":no_bell:"),
    ("\U0001F4E2", ":loudspeaker:"),
    ("\U0001F4E3", ":mega:"),
    # Success & celebration
    ("\U0001F389", ":tada:"),
    ("\U0001F38A", ":confetti_ball:"),
    ("\U0001F388", ":balloon:"),
    ("\U0001F381", ":gift:"),
    ("\U0001F3C6", ":trophy:"),
    ("\U0001F3C5", ":medal_sports:"),
    ("\U0001F947", ":1st_place_medal:"),
    ("\U0001F948", ":2nd_place_medal:"),
    ("\U0001F949", ":3rd_place_medal:"),
    # Warning & status
    ("\u26A0\uFE0F", ":warning:"),
    ("\u26A0", ":warning:"),
    ("\U0001F6A8", ":rotating_light:"),
    ("\U0001F6AB", ":no_entry_sign:"),
    ("\u26D4", ":no_entry:"),
    ("\U0001F6D1", ":stop_sign:"),
    ("\U0001F6A7", ":construction:"),
    ("\U0001F512", ":lock:"),
    ("\U0001F513", ":unlock:"),
    ("\U0001F511", ":key:"),
    ("\U0001F5DD\uFE0F", ":old_key:"),
    ("\U0001F5DD", ":old_key:"),
    ("\U0001F6E1\uFE0F", ":shield:"),
    ("\U0001F6E1", ":shield:"),
    # Science & nature
    ("\U0001F680", ":rocket:"),
    ("\u2B50", ":star:"),
    ("\U0001F31F", ":star2:"),
    ("\U0001F320", ":stars:"),
    ("\u2728", ":sparkles:"),
    ("\U0001F525", ":fire:"),
    ("\U0001F4A1", ":bulb:"),
    ("\u26A1", ":zap:"),
    ("\U0001F30D", ":earth_africa:"),
    ("\U0001F30E", ":earth_americas:"),
    ("\U0001F30F", ":earth_asia:"),
    ("\U0001F321\uFE0F", ":thermometer:"),
    ("\U0001F321", ":thermometer:"),
    ("\u2600\uFE0F", ":sunny:"),
    ("\u2600", ":sunny:"),
    ("\u2601\uFE0F", ":cloud:"),
    ("\u2601", ":cloud:"),
    ("\U0001F327\uFE0F", ":cloud_with_rain:"),
    ("\U0001F327", ":cloud_with_rain:"),
    ("\u26C8\uFE0F", ":cloud_with_lightning_and_rain:"),
    ("\u26C8", ":cloud_with_lightning_and_rain:"),
    ("\u2744\uFE0F", ":snowflake:"),
    ("\u2744", ":snowflake:"),
    # Time
    ("\U0001F55B", ":clock12:"),
    ("\u23F0", ":alarm_clock:"),
    ("\u23F1\uFE0F", ":stopwatch:"),
    ("\u23F1", ":stopwatch:"),
    ("\u23F2\uFE0F", ":timer_clock:"),
    ("\u23F2", ":timer_clock:"),
    ("\u231A", ":watch:"),
    ("\U0001F4C5", ":date:"),
    ("\U0001F4C6", ":calendar:"),
    ("\U0001F5D3\uFE0F", ":spiral_calendar:"),
    ("\U0001F5D3", ":spiral_calendar:"),
    # Tools
    ("\U0001F527", ":wrench:"),
    ("\U0001F528", ":hammer:"),
    ("\u2692\uFE0F", ":hammer_and_pick:"),
    ("\u2692", ":hammer_and_pick:"),
    ("\U0001F6E0\uFE0F", ":hammer_and_wrench:"),
    ("\U0001F6E0", ":hammer_and_wrench:"),
    ("\u2699\uFE0F", ":gear:"),
    ("\u2699", ":gear:"),
    ("\U0001F517", ":link:"),
    ("\u26D3\uFE0F", ":chains:"),
    ("\u26D3", ":chains:"),
    ("\U0001F9F0", ":toolbox:"),
    ("\U0001F9F2", ":magnet:"),
    ("\U0001FA9C", ":ladder:"),
    # Misc
    ("\U0001F3AF", ":dart:"),
    ("\U0001F3B2", ":game_die:"),
    ("\U0001F9E9", ":jigsaw:"),
    ("\U0001F3AD", ":performing_arts:"),
    ("\U0001F3A8", ":art:"),
    ("\U0001F9F5", ":thread:"),
    ("\U0001F9F6", ":yarn:"),
    # Food & drink
    ("\u2615", ":coffee:"),
    ("\U0001F37A", ":beer:"),
    ("\U0001F37B", ":beers:"),
    ("\U0001F370", ":cake:"),
    ("\U0001F355", ":pizza:"),
    # Animals
    ("\U0001F41B", ":bug:"),
    ("\U0001F41C", ":ant:"),
    ("\U0001F41D", ":bee:"),
    ("\U0001F40D", ":snake:"),
    ("\U0001F422", ":turtle:"),
    ("\U0001F419", ":octopus:"),
    ("\U0001F433", ":whale:"),
    ("\U0001F42C", ":dolphin:"),
    ("\U0001F984", ":unicorn:"),
    ("\U0001F98A", ":fox_face:"),
    ("\U0001F43B", ":bear:"),
    ("\U0001F431", ":cat:"),
    ("\U0001F436", ":dog:"),
    # Info & documentation
    ("\u2139\uFE0F", ":information_source:"),
    ("\u2139", ":information_source:"),
    ("\U0001F5E3\uFE0F", ":speaking_head:"),
    ("\U0001F5E3", ":speaking_head:"),
    ("\U0001F4E4", ":outbox_tray:"),
    ("\U0001F4E5", ":inbox_tray:"),
    # Transport & shipping
    ("\U0001F6A2", ":ship:"),
    ("\u2708\uFE0F", ":airplane:"),
    ("\u2708", ":airplane:"),
    ("\U0001F69A", ":truck:"),
    ("\U0001F6F0\uFE0F", ":artificial_satellite:"),
    ("\U0001F6F0", ":artificial_satellite:"),
    # Checkboxes
    ("\u2611\uFE0F", ":ballot_box_with_check:"),
    ("\u2611", ":ballot_box_with_check:"),
    ("\u2610", ":ballot_box:"),
    # Media
    ("\U0001F4F7", ":camera:"),
    ("\U0001F3AC", ":clapper:"),
    ("\U0001F4FA", ":tv:"),
    ("\U0001F4FB", ":radio:"),
    ("\U0001F4FD\uFE0F", ":film_projector:"),
    ("\U0001F4FD", ":film_projector:"),
    ("\U0001F39E\uFE0F", ":film_strip:"),
    ("\U0001F39E", ":film_strip:"),
    ("\U0001F4A7", ":droplet:"),
    ("\U0001F30A", ":ocean:"),
    # Keycap sequences (digit/symbol + U+FE0F + U+20E3)
    ("0\uFE0F\u20E3", ":zero:"),
    ("1\uFE0F\u20E3", ":one:"),
    ("2\uFE0F\u20E3", ":two:"),
    ("3\uFE0F\u20E3", ":three:"),
    ("4\uFE0F\u20E3", ":four:"),
    ("5\uFE0F\u20E3", ":five:"),
    ("6\uFE0F\u20E3", ":six:"),
    ("7\uFE0F\u20E3", ":seven:"),
    ("8\uFE0F\u20E3", ":eight:"),
    ("9\uFE0F\u20E3", ":nine:"),
    ("\U0001F51F", ":keycap_ten:"),
    ("#\uFE0F\u20E3", ":hash:"),
    ("*\uFE0F\u20E3", ":asterisk:"),
    # Copyright, trademark, misc symbols
    ("\u00A9\uFE0F", ":copyright:"),
    ("\u00A9", ":copyright:"),
    ("\u00AE\uFE0F", ":registered:"),
    ("\u00AE", ":registered:"),
    ("\u2122\uFE0F", ":tm:"),
    ("\u2122", ":tm:"),
    ("\u267B\uFE0F", ":recycle:"),
    ("\u267B", ":recycle:"),
    ("\u269B\uFE0F", ":atom_symbol:"),
    ("\u269B", ":atom_symbol:"),
    ("\u2622\uFE0F", ":radioactive:"),
    ("\u2622", ":radioactive:"),
    ("\u2623\uFE0F", ":biohazard:"),
    ("\u2623", ":biohazard:"),
    ("\u262F\uFE0F", ":yin_yang:"),
    ("\u262F", ":yin_yang:"),
    ("\u2716\uFE0F", ":heavy_multiplication_x:"),
    ("\u2716", ":heavy_multiplication_x:"),
    ("\u2795", ":heavy_plus_sign:"),
    ("\u2796", ":heavy_minus_sign:"),
    ("\u2797", ":heavy_division_sign:"),
    ("\u267E\uFE0F", ":infinity:"),
    ("\u267E", ":infinity:"),
    ("\U0001F4F4", ":signal_strength:"),
    # Flags
    ("\U0001F3C1", ":checkered_flag:"),
    ("\U0001F6A9", ":triangular_flag_on_post:"),
    ("\U0001F3F4", ":black_flag:"),
    ("\U0001F3F3\uFE0F", ":white_flag:"),
    ("\U0001F3F3", ":white_flag:"),
)


@lru_cache(maxsize=None)
def emoji_entries() -> tuple[EmojiEntry, ...]:
    """Return the unique emoji entries, longest UTF-8 sequence first.

    Longer sequences come first so that a sequence with a variation selector
    matches before its bare prefix. The first shortcode given for a sequence wins.
    """
    unique: dict[str, str] = {}
    for seq, code in _RAW_EMOJI:
        unique.setdefault(seq, code)
    entries = (EmojiEntry(seq, code) for seq, code in unique.items())
    return tuple(sorted(entries, key=lambda e: len(e.seq.encode("utf-8")), reverse=True))