"""
Constants and Enums for AE Lingo
"""
from enum import Enum
from typing import Dict, List


class InputMode(str, Enum):
    """Kind of user input for a translation."""
    TEXT = "TEXT"
    IMAGE = "IMAGE"


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


GLOSSARY_VERSION = "2024.1"

TRANSLATOR_ROLE = "Senior Adobe After Effects (AE) Localization Specialist."
TRANSLATOR_GOAL = "Translate plugin parameters to standard Adobe Simplified Chinese terms."

# Canonical EN -> CN terminology, grouped by the panel/workflow it belongs to
AE_GLOSSARY: Dict[str, Dict[str, str]] = {
    'transform': {
        'Transform': '变换',
        'Anchor Point': '锚点',
        'Position': '位置',
        'Scale': '缩放',
        'Rotation': '旋转',
        'Opacity': '不透明度',
    },
    'project': {
        'Composition': '合成',
        'Pre-compose': '预合成',
        'Footage': '素材',
        'Layer': '图层',
        'Mask': '蒙版',
    },
    'animation': {
        'Keyframe': '关键帧',
        'Easy Ease': '缓动',
        'Graph Editor': '图表编辑器',
        'Interpolation': '插值',
    },
    'compositing': {
        'Blending Mode': '混合模式',
        'Track Matte': '轨道遮罩',
        'Alpha Matte': 'Alpha遮罩',
        'Luma Matte': '亮度遮罩',
    },
    'layers': {
        'Null Object': '空对象',
        'Adjustment Layer': '调整图层',
        'Solid': '固态层',
    },
    'panels': {
        'Effect Controls': '特效控制台',
        'Expression': '表达式',
        'Parent & Link': '父级和链接',
    },
    'render': {
        'Render Queue': '渲染队列',
        'Output Module': '输出模块',
        'Codec': '编码器',
    },
    'noise': {
        'Noise': '噪波',
        'Fractal Noise': '分形噪波',
        'Grain': '颗粒',
        'Glitch': '故障/毛刺',
    },
    'stylize': {
        'Glow': '辉光',
        'Blur': '模糊',
        'Sharpen': '锐化',
        'Distortion': '扭曲',
        'Displacement Map': '置换图',
    },
    'shapes': {
        'Gradient Ramp': '渐变',
        'Stroke': '描边',
        'Fill': '填充',
        'Trim Paths': '修剪路径',
    },
    'particles': {
        'Particle': '粒子',
        'Emitter': '发射器',
        'Velocity': '速度',
        'Life': '生命/寿命',
    },
    'physics': {
        'Turbulence Field': '湍流场',
        'Physics': '物理学',
        'Gravity': '重力',
        'Resistance': '阻力',
    },
    'lighting': {
        'Specular': '高光',
        'Ambient': '环境光',
        'Reflection': '反射',
        'Refraction': '折射',
        'Shadow': '阴影',
    },
    'time': {
        'Offset': '偏移',
        'Evolution': '演化',
        'Cycle': '循环',
        'Random Seed': '随机种子',
    },
    'matte': {
        'Threshold': '阈值',
        'Tolerance': '容差',
        'Range': '范围',
        'Smoothness': '平滑度',
        'Feather': '羽化',
    },
    'color': {
        'Hue': '色相',
        'Saturation': '饱和度',
        'Luminance': '亮度',
        'Contrast': '对比度',
        'Levels': '色阶',
        'Curves': '曲线',
    },
}

TRANSLATION_RULES: List[str] = [
    'Fix OCR typos (e.g. "0pacity"->"Opacity", "M0de"->"Mode", "l1ght"->"light").',
    'Terminology: Use the EXACT Chinese terms above. Do NOT use synonyms '
    '(e.g. use "不透明度" not "透明度").',
    'Context: If a word has multiple meanings, choose the VFX/Video Editing meaning '
    '(e.g. "Screen" -> "屏幕"(混合模式) not "显示器").',
    'Description: <15 words, beginner-friendly visual explanation of what the parameter controls.',
]

# Fixed user-turn instructions
TEXT_INSTRUCTION = "Translate these AE plugin parameters:"
IMAGE_INSTRUCTION = "Extract AE interface text & Translate to Chinese JSON."

# History snippet used for screenshot translations
IMAGE_SNIPPET = "截图识别 (Image Translation)"

# User-facing messages
MSG_EMPTY_TEXT = "请输入需要翻译的参数名称"
MSG_NO_IMAGE = "请上传或粘贴插件截图"
MSG_EMPTY_RESULT = "未能识别到有效内容，请重试"
MSG_SERVICE_UNAVAILABLE = "翻译服务暂时不可用，请稍后再试"
MSG_BUSY = "正在翻译中，请稍候"
