"""English translations."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "Gr",
    "tile.chun": "Rd",

    # Winds
    "wind.east": "East",
    "wind.south": "South",
    "wind.west": "West",
    "wind.north": "North",

    # Yaku
    "yaku.立直": "Riichi",
    "yaku.門前清自摸和": "Menzen Tsumo",
    "yaku.平和": "Pinfu",
    "yaku.七対子": "Chiitoitsu",
    "yaku.役牌白": "Yakuhai (White)",
    "yaku.役牌發": "Yakuhai (Green)",
    "yaku.役牌中": "Yakuhai (Red)",
    "yaku.場風牌": "Round Wind",
    "yaku.自風牌": "Seat Wind",
    "yaku.断么九": "Tanyao",
    "yaku.混老頭": "Honroutou",
    "yaku.混一色": "Honitsu",
    "yaku.清一色": "Chinitsu",
    "yaku.三色同順": "Sanshoku Doujun",
    "yaku.一気通貫": "Ittsu",
    "yaku.三色同刻": "Sanshoku Doukou",
    "yaku.対々和": "Toitoi",
    "yaku.一盃口": "Iipeikou",
    "yaku.二盃口": "Ryanpeikou",
    "yaku.混全帯么九": "Chanta",
    "yaku.純全帯么九": "Junchan",
    "yaku.三暗刻": "San Ankou",
    "yaku.小三元": "Shousangen",
    "yaku.三槓子": "San Kantsu",

    # Yakuman
    "yaku.四暗刻": "Suu Ankou",
    "yaku.四暗刻単騎待ち": "Suu Ankou Tanki",
    "yaku.四槓子": "Suu Kantsu",
    "yaku.大三元": "Daisangen",
    "yaku.大四喜": "Daisuushii",
    "yaku.小四喜": "Shousuushii",
    "yaku.国士無双": "Kokushi Musou",
    "yaku.国士無双十三面待ち": "Kokushi Musou 13-sided",
    "yaku.緑一色": "Ryuuiisou",
    "yaku.清老頭": "Chinroutou",
    "yaku.字一色": "Tsuuiisou",
    "yaku.九蓮宝燈": "Chuuren Poutou",
    "yaku.純正九蓮宝燈": "Junsei Chuuren Poutou",

    # Limits
    "limit.満貫": "Mangan",
    "limit.跳満": "Haneman",
    "limit.倍満": "Baiman",
    "limit.三倍満": "Sanbaiman",
    "limit.数え役満": "Kazoe Yakuman",
    "limit.役満": "Yakuman",
    "limit.二倍役満": "Double Yakuman",
    "limit.三倍役満": "Triple Yakuman",
    "limit.四倍役満": "Quadruple Yakuman",
    "limit.五倍役満": "Quintuple Yakuman",
    "limit.六倍役満": "Sextuple Yakuman",
    "limit.七倍役満": "Septuple Yakuman",

    # Report
    "report.hand": "Hand",
    "report.tile_count": "{count} tiles",
    "report.situation": "{round} round, {seat} seat",
    "report.riichi": "Riichi",
    "report.tsumo": "Tsumo",
    "report.ron": "Ron",
    "report.yaku": "Yaku",
    "report.yakuman": "Yakuman",
    "report.name": "Name",
    "report.fan": "Han",
    "report.fan_value": "{fan} han",
    "report.multiplier": "x{multiplier}",
    "report.dora": "Dora",
    "report.red_dora": "Red Dora",
    "report.bonus_dora": "Nuki Dora",
    "report.ura_dora": "Ura Dora",
    "report.summary": "{fu} fu {fan} han, {points} basic points",
    "report.yakuman_summary": "{points} basic points",
    "report.no_yaku": "No yaku",
    "report.not_hu": "Not a winning hand",
    "report.reading": "Reading {index}",
    "report.payment_ron": "Ron {points}",
    "report.payment_dealer_tsumo": "Tsumo {each} all",
    "report.payment_tsumo": "Tsumo {non_dealer}/{dealer}",
    "report.waits": "Waits",
    "report.discard": "Discard",
    "report.needed": "Waiting on",
    "report.noten": "Not ready",

    # Messages
    "msg.error": "Error: {message}",
    "msg.bad_dora": "Cannot read dora indicator {code!r}, scoring without dora",
}
