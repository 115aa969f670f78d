"""Advisory text catalog.

All plan statements live here so the assembler only decides which of them
apply and in what order.
"""

from typing import Final

from .entities import IntensityLevel, SubjectCategory

FEEDING_BASELINE: Final[dict[SubjectCategory, tuple[str, ...]]] = {
    SubjectCategory.FELINE: (
        "分 2–3 餐投喂，优先高蛋白主食；零食控制在每日热量的 10% 内。",
        "准备清水 + 流动水源（饮水机/循环碗），观察是否主动饮水。",
        "用“嗅闻/慢食碗”延长进食时间，降低狼吞风险。",
    ),
    SubjectCategory.CANINE: (
        "分 2 餐投喂，固定时间与固定地点，减少应激。",
        "训练奖励零食“拆分多次”，总量控制在每日热量 10% 内。",
        "饭后至少休息 40–60 分钟再进行剧烈运动，避免胃扭转风险。",
    ),
    SubjectCategory.OTHER: (
        "主食优先、定时定量；零食不超过每日热量 10%。",
        "清水随时可得，水碗每日清洗；天气热可加一次补水检查。",
        "尝试“慢喂/嗅闻投喂”方式，让进食节奏更稳定。",
    ),
}

FEEDING_JUVENILE: Final = "幼年期：少量多餐（3–4 餐），逐步建立固定作息。"
FEEDING_SENSITIVE_DIGESTION: Final = (
    "肠胃敏感：避免频繁换粮；若需换粮，7 天渐进混粮过渡。"
)
FEEDING_OVERWEIGHT: Final = "偏胖：优先选择控重主粮；将日粮拆成更小份，提高饱腹感。"
FEEDING_UNDERWEIGHT: Final = "偏瘦：增加一次小餐或提升能量密度；优先做体况评估再加量。"
FEEDING_SENIOR_CHRONIC: Final = (
    "老年慢病：遵循兽医处方/处方粮建议；记录食欲、饮水和排泄变化。"
)

EXERCISE_BASELINE: Final[dict[SubjectCategory, tuple[str, ...]]] = {
    SubjectCategory.FELINE: (
        "互动逗猫 2 轮：每轮 8–12 分钟（逗棒/追逐），以“捕获-进食-休息”收尾。",
        "设置垂直空间：猫爬架/窗台观察点，鼓励自主活动。",
        "嗅闻/找零食小游戏 5 分钟，提高专注与消耗。",
    ),
    SubjectCategory.CANINE: (
        "外出散步 2 次：每次 20–40 分钟，先慢走热身再加速。",
        "加入 5–8 分钟基础训练（坐/等/召回），用脑消耗替代纯体力。",
        "晚间安排嗅闻探索（草地/闻闻路线）10 分钟，帮助放松。",
    ),
    SubjectCategory.OTHER: (
        "以“轻量频次”为主：2–3 次短时活动，总计 20–40 分钟。",
        "加入 5 分钟嗅闻/益智玩具，让消耗更均衡。",
        "活动后观察呼吸与精神状态，据此逐步调整单次时长。",
    ),
}

EXERCISE_BANNER: Final[dict[IntensityLevel, str]] = {
    IntensityLevel.LOW: "今日强度偏低：以慢走/低冲击互动为主，避免长时间冲刺或跳跃。",
    IntensityLevel.MEDIUM: "今日强度中等：有氧 + 训练 + 嗅闻组合，节奏更稳定。",
    IntensityLevel.HIGH: "今日强度偏高：分段运动，确保补水与休息，避免一次性拉满。",
}

EXERCISE_JOINT_CARE: Final = "关节/老年：优先平地慢走与缓坡；减少上下楼与高落差跳跃。"
EXERCISE_OVERWEIGHT: Final = (
    "控重建议：把总运动拆成更多短段（例如 4×10 分钟），提升坚持度。"
)

CARE_BASELINE: Final[tuple[str, ...]] = (
    "日常梳毛 3–8 分钟：顺毛 + 逆毛轻梳，重点腋下/腹部/尾根，减少打结。",
    "牙齿护理：每日或隔日刷牙 1 次；无法刷牙时用洁齿零食/凝胶替代。",
    "脚掌检查：是否有裂口、异物、红肿；外出回家擦脚更稳妥。",
)

CARE_JOINT_CARE: Final = (
    "关节护理：热身 3–5 分钟；运动后擦干脚掌，必要时用温热毛巾热敷 5 分钟。"
)
CARE_SENSITIVE_SKIN: Final = (
    "皮肤敏感：减少频繁洗澡；洗护选温和配方并彻底吹干，观察红痒与掉毛区域。"
)
CARE_SENSITIVE_DIGESTION: Final = (
    "肠胃敏感：记录大便形态（软硬/次数/黏液），有助于快速定位诱因。"
)
CARE_JUVENILE: Final = (
    "幼年期：增加“触碰脱敏”（摸耳朵/爪子/尾巴），为未来护理打基础。"
)

SAFETY_BASELINE: Final[tuple[str, ...]] = (
    "观察精神与食欲：若连续 24 小时明显下降，建议尽快咨询兽医。",
    "观察饮水与排泄：突然增多/减少都值得记录；出现血便/呕吐频繁需就医。",
    "今日环境：保持安静角落与可躲藏空间，减少突发噪音与强行抱起。",
)

NOTES_LABEL: Final = "备注提醒："
