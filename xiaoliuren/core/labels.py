# 小六壬 six palaces, in counting order
LABELS: tuple[str, ...] = ('大安', '留连', '速喜', '赤口', '小吉', '空亡')

PALACES = len(LABELS)


def label_at(index: int) -> str:
    return LABELS[index % PALACES]
