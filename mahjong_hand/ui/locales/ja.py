"""Japanese translations."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",

    # Winds
    "wind.east": "東",
    "wind.south": "南",
    "wind.west": "西",
    "wind.north": "北",

    # Yaku
    "yaku.立直": "立直",
    "yaku.門前清自摸和": "門前清自摸和",
    "yaku.平和": "平和",
    "yaku.七対子": "七対子",
    "yaku.役牌白": "役牌 白",
    "yaku.役牌發": "役牌 發",
    "yaku.役牌中": "役牌 中",
    "yaku.場風牌": "場風牌",
    "yaku.自風牌": "自風牌",
    "yaku.断么九": "断么九",
    "yaku.混老頭": "混老頭",
    "yaku.混一色": "混一色",
    "yaku.清一色": "清一色",
    "yaku.三色同順": "三色同順",
    "yaku.一気通貫": "一気通貫",
    "yaku.三色同刻": "三色同刻",
    "yaku.対々和": "対々和",
    "yaku.一盃口": "一盃口",
    "yaku.二盃口": "二盃口",
    "yaku.混全帯么九": "混全帯么九",
    "yaku.純全帯么九": "純全帯么九",
    "yaku.三暗刻": "三暗刻",
    "yaku.小三元": "小三元",
    "yaku.三槓子": "三槓子",

    # Yakuman
    "yaku.四暗刻": "四暗刻",
    "yaku.四暗刻単騎待ち": "四暗刻単騎待ち",
    "yaku.四槓子": "四槓子",
    "yaku.大三元": "大三元",
    "yaku.大四喜": "大四喜",
    "yaku.小四喜": "小四喜",
    "yaku.国士無双": "国士無双",
    "yaku.国士無双十三面待ち": "国士無双十三面待ち",
    "yaku.緑一色": "緑一色",
    "yaku.清老頭": "清老頭",
    "yaku.字一色": "字一色",
    "yaku.九蓮宝燈": "九蓮宝燈",
    "yaku.純正九蓮宝燈": "純正九蓮宝燈",

    # Limits
    "limit.満貫": "満貫",
    "limit.跳満": "跳満",
    "limit.倍満": "倍満",
    "limit.三倍満": "三倍満",
    "limit.数え役満": "数え役満",
    "limit.役満": "役満",
    "limit.二倍役満": "二倍役満",
    "limit.三倍役満": "三倍役満",
    "limit.四倍役満": "四倍役満",
    "limit.五倍役満": "五倍役満",
    "limit.六倍役満": "六倍役満",
    "limit.七倍役満": "七倍役満",

    # Report
    "report.hand": "手牌",
    "report.tile_count": "{count}枚",
    "report.situation": "{round}場 {seat}家",
    "report.riichi": "立直",
    "report.tsumo": "ツモ",
    "report.ron": "ロン",
    "report.yaku": "役",
    "report.yakuman": "役満",
    "report.name": "役名",
    "report.fan": "翻数",
    "report.fan_value": "{fan}翻",
    "report.multiplier": "{multiplier}倍",
    "report.dora": "ドラ",
    "report.red_dora": "赤ドラ",
    "report.bonus_dora": "抜きドラ",
    "report.ura_dora": "裏ドラ",
    "report.summary": "{fu}符 {fan}翻 基本点{points}",
    "report.yakuman_summary": "基本点{points}",
    "report.no_yaku": "役なし",
    "report.not_hu": "和了形ではありません",
    "report.reading": "読み {index}",
    "report.payment_ron": "ロン {points}点",
    "report.payment_dealer_tsumo": "ツモ {each}点オール",
    "report.payment_tsumo": "ツモ {non_dealer}/{dealer}点",
    "report.waits": "待ち",
    "report.discard": "打牌",
    "report.needed": "待ち牌",
    "report.noten": "ノーテン",

    # Messages
    "msg.error": "エラー: {message}",
    "msg.bad_dora": "ドラ表示牌 {code!r} を読めません。ドラなしで計算します",
}
