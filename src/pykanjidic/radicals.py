"""Defines the default radical index lookup (the 214 Kangxi radicals)."""

from typing import Callable

from .errors import RadicalLookupError

# Maps a radical index to its canonical value
RadicalLookup = Callable[[int], str]

KANGXI_RADICALS = (
    '一丨丶丿乙亅二亠人儿入八冂冖冫几凵刀力勹匕匚匸十卜卩厂厶又口'
    '囗土士夂夊夕大女子宀寸小尢尸屮山川工己巾干幺广廴廾弋弓彐彡彳'
    '心戈戸手支攴文斗斤方无日曰月木欠止歹殳毋比毛氏气水火爪父爻爿'
    '片牙牛犬玄玉瓜瓦甘生用田疋疒癶白皮皿目矛矢石示禸禾穴立竹米糸'
    '缶网羊羽老而耒耳聿肉臣自至臼舌舛舟艮色艸虍虫血行衣襾見角言谷'
    '豆豕豸貝赤走足身車辛辰辵邑酉釆里金長門阜隶隹雨青非面革韋韭音'
    '頁風飛食首香馬骨高髟鬥鬯鬲鬼魚鳥鹵鹿麦麻黄黍黒黹黽鼎鼓鼠鼻齊'
    '齒竜亀龠'
)


def index_radical(index: int) -> str:
    """Returns the radical numbered `index` in the Kangxi table.

    Args:
        index: The 1-based radical number.

    Returns:
        The radical character.

    Raises:
        RadicalLookupError: If `index` is outside ``1..214``.
    """

    if not 1 <= index <= len(KANGXI_RADICALS):
        raise RadicalLookupError(index)
    return KANGXI_RADICALS[index - 1]
