"""Built-in tool library — prompts, shapes, schemas and normalizers."""

from __future__ import annotations

from typing import Any

from dissect.tools.config import ToolConfig
from dissect.tools.inputs import AntiLifeInput, DecisionInput, StitcherInput
from dissect.tools.prompts import build_structured_prompt
from dissect.tools.results import (
    BiasResult,
    CodeArchResult,
    CostCalcResult,
    DebateResult,
    DeceptionResult,
    DecisionPathResult,
    DevilsResult,
    EgoBoundaryResult,
    ExtremeSimResult,
    JuryResult,
    LangSmellResult,
    SubtextResult,
    WorldSimResult,
)


# ── Schema helpers (Gemini response-schema dialect) ─────────────────


def _string(*enum: str) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "STRING"}
    if enum:
        schema["enum"] = list(enum)
    return schema


def _number() -> dict[str, Any]:
    return {"type": "NUMBER"}


def _array(items: dict[str, Any]) -> dict[str, Any]:
    return {"type": "ARRAY", "items": items}


def _object(**properties: dict[str, Any]) -> dict[str, Any]:
    return {"type": "OBJECT", "properties": properties}


def _strings(*names: str) -> dict[str, Any]:
    """Object schema whose properties are all strings."""
    return _object(**{name: _string() for name in names})


# ── Tools ───────────────────────────────────────────────────────────


ANTI_LIFE: ToolConfig[AntiLifeInput, dict[str, Any]] = ToolConfig(
    id="ANTI_LIFE",
    title="项目验尸官",
    description="假设项目已失败，进行事前验尸分析。",
    system_prompt=build_structured_prompt(
        "你是一名来自未来的‘项目验尸官’(Project Coroner)。你的工作是对用户提出的计划进行‘尸检’。请假设这个计划已经彻底失败了。",
        '{ "deathTime": "2024-Q4", "causeOfDeath": "...", "clinicalAnalysis": "...", "fatalSymptom": "...", "preventableMeasure": "...", "survivalRate": 15 }',
        "你需要撰写一份冷酷、专业、充满病理学术语的验尸报告。分析死因、死亡时间、致命病灶。必须用简体中文回答。",
    ),
    build_user_prompt=lambda i: f'计划/目标："{i.profile}"\n已知弱点/担忧："{i.weakness}"\n\n请出具尸检报告。',
    expected_shape={
        "deathTime": "string",
        "causeOfDeath": "string",
        "clinicalAnalysis": "string",
        "fatalSymptom": "string",
        "preventableMeasure": "string",
        "survivalRate": 0,
    },
    output_schema=_object(
        deathTime=_string(),
        causeOfDeath=_string(),
        clinicalAnalysis=_string(),
        fatalSymptom=_string(),
        preventableMeasure=_string(),
        survivalRate=_number(),
    ),
)

BIAS_DETECTOR: ToolConfig[str, BiasResult] = ToolConfig(
    id="BIAS_DETECTOR",
    title="认知生化扫描",
    description="像检测病毒一样扫描文本中的逻辑谬误。",
    system_prompt=build_structured_prompt(
        "你是一个‘认知生化扫描仪’(Cognitive Biohazard Scanner)。将用户输入的文本视为‘生物样本’。你的任务是扫描样本中的‘逻辑谬误病毒’(Logical Fallacy Viruses)。",
        '{ "infectionRate": 0, "overallDiagnosis": "...", "viruses": [{ "name": "...", "severity": "HIGH", "symptom": "...", "treatment": "..." }], "quarantineAdvice": "..." }',
        "必须用简体中文。输出风格要像生化危机实验室报告。severity 必须是 LOW, MEDIUM, HIGH, CRITICAL。",
    ),
    build_user_prompt=lambda text: f'扫描样本："{text}"。',
    expected_shape={
        "infectionRate": 0,
        "overallDiagnosis": "string",
        "viruses": [],
        "quarantineAdvice": "string",
    },
    output_schema=_object(
        infectionRate=_number(),
        overallDiagnosis=_string(),
        viruses=_array(_object(
            name=_string(),
            severity=_string("LOW", "MEDIUM", "HIGH", "CRITICAL"),
            symptom=_string(),
            treatment=_string(),
        )),
        quarantineAdvice=_string(),
    ),
    normalize=BiasResult.from_raw,
)

WORLD_SIM: ToolConfig[str, WorldSimResult] = ToolConfig(
    id="WORLD_SIM",
    title="平行宇宙观测站",
    description="推演异变点引发的蝴蝶效应和新世界法则。",
    system_prompt=build_structured_prompt(
        "你是一个‘平行宇宙观测站’的AI。用户输入一个‘异变点’，你需要推演这个新世界的时间线和生存法则。",
        '{ "chaosLevel": 50, "divergencePoint": "...", "timeline": [{ "year": "...", "event": "...", "impact": "..." }], "breakingNews": { "headline": "...", "source": "...", "date": "..." }, "newLaws": ["..."], "survivorGuide": { "role": "...", "keySkill": "...", "mustHaveItem": "..." } }',
        "必须用简体中文。风格要像科幻小说大纲。Timeline 必须包含至少3个关键节点。",
    ),
    build_user_prompt=lambda premise: f'异变点假设："{premise}"。观测该宇宙。',
    expected_shape={
        "chaosLevel": 0,
        "divergencePoint": "string",
        "timeline": [],
        "breakingNews": {},
        "newLaws": [],
        "survivorGuide": {},
    },
    output_schema=_object(
        chaosLevel=_number(),
        divergencePoint=_string(),
        timeline=_array(_strings("year", "event", "impact")),
        breakingNews=_strings("headline", "source", "date"),
        newLaws=_array(_string()),
        survivorGuide=_strings("role", "keySkill", "mustHaveItem"),
    ),
    normalize=WorldSimResult.from_raw,
)

SUBTEXT: ToolConfig[str, SubtextResult] = ToolConfig(
    id="SUBTEXT",
    title="真相审讯室",
    description="拆解话语背后的真实意图和权力关系。",
    system_prompt=build_structured_prompt(
        "你是一个‘真相审讯室’的测谎专家。用户输入一段‘被拦截的通讯’，你需要分析其中的潜台词和权力关系。",
        '{ "bullshitMeter": 50, "voiceStressAnalysis": "...", "declassifiedContent": [{ "original": "...", "decoded": "...", "intent": "..." }], "verdict": "...", "powerDynamics": "..." }',
        "必须用简体中文。风格要像冷战时期的情报解密文件。",
    ),
    build_user_prompt=lambda text: f'分析拦截的通讯："{text}"',
    expected_shape={
        "bullshitMeter": 0,
        "voiceStressAnalysis": "string",
        "declassifiedContent": [],
        "verdict": "string",
        "powerDynamics": "string",
    },
    output_schema=_object(
        bullshitMeter=_number(),
        voiceStressAnalysis=_string(),
        declassifiedContent=_array(_strings("original", "decoded", "intent")),
        verdict=_string(),
        powerDynamics=_string(),
    ),
    normalize=SubtextResult.from_raw,
)

EGO_BOUNDARY: ToolConfig[str, EgoBoundaryResult] = ToolConfig(
    id="EGO_BOUNDARY",
    title="精神结构风洞",
    description="对人格进行高压测试，寻找崩溃点。",
    system_prompt=build_structured_prompt(
        "你是一个‘精神结构工程师’。把用户的人格视为建筑物，进行‘风洞压力测试’。",
        '{ "integrityScore": 50, "yieldPoint": { "trigger": "...", "pressureLevel": "..." }, "fractureMode": "...", "structuralWeaknesses": [{ "location": "...", "description": "...", "riskLevel": "HIGH" }], "reinforcementPlan": "..." }',
        "必须用简体中文。使用工程力学术语隐喻心理状态。",
    ),
    build_user_prompt=lambda desc: f'启动风洞测试。测试对象自述："{desc}"。',
    expected_shape={
        "integrityScore": 0,
        "yieldPoint": {},
        "fractureMode": "string",
        "structuralWeaknesses": [],
        "reinforcementPlan": "string",
    },
    output_schema=_object(
        integrityScore=_number(),
        yieldPoint=_strings("trigger", "pressureLevel"),
        fractureMode=_string(),
        structuralWeaknesses=_array(_object(
            location=_string(),
            description=_string(),
            riskLevel=_string("LOW", "MED", "HIGH", "CRITICAL"),
        )),
        reinforcementPlan=_string(),
    ),
    normalize=EgoBoundaryResult.from_raw,
)

LANG_SMELL: ToolConfig[str, LangSmellResult] = ToolConfig(
    id="LANG_SMELL",
    title="语义光谱仪",
    description="分析文本的化学成分、阶层气味和毒性。",
    system_prompt=build_structured_prompt(
        "你是一个‘语义光谱仪’。像化学分析一样，分析文本的‘成分’。",
        '{ "composition": [{ "label": "...", "percentage": 10, "colorCode": "..." }], "scentProfile": { "topNote": "...", "middleNote": "...", "baseNote": "..." }, "toxicityPPM": 100, "aiProbability": 0, "detectionLog": "..." }',
        "必须用简体中文。分析语气、用词倾向、潜意识情绪。",
    ),
    build_user_prompt=lambda text: f'分析样本："{text}"。',
    expected_shape={
        "composition": [],
        "scentProfile": {},
        "toxicityPPM": 0,
        "aiProbability": 0,
        "detectionLog": "string",
    },
    output_schema=_object(
        composition=_array(_object(label=_string(), percentage=_number(), colorCode=_string())),
        scentProfile=_strings("topNote", "middleNote", "baseNote"),
        toxicityPPM=_number(),
        aiProbability=_number(),
        detectionLog=_string(),
    ),
    normalize=LangSmellResult.from_raw,
)

DECISION_PATH: ToolConfig[DecisionInput, DecisionPathResult] = ToolConfig(
    id="DECISION_PATH",
    title="决策推演矩阵",
    description="理性拆解复杂决策，权衡收益与不可逆风险。",
    system_prompt=build_structured_prompt(
        "You are a professional decision analysis assistant. Your role is to analyze decisions using a structured comparison framework.",
        '{ "decision_nature": { "type": "...", "core_conflict": "...", "key_uncertainty": "..." }, "comparison_matrix": [], "risk_warnings": [], "experimentation_suggestions": [], "stop_loss_signals": [], "cooling_advice": {} }',
        "Must answer in Simplified Chinese. Be objective, rational, and exhaustive.",
    ),
    build_user_prompt=lambda decision: f"Analyze the following decision:\n{decision.to_prompt_json()}",
    expected_shape={
        "decision_nature": {},
        "comparison_matrix": [],
        "risk_warnings": [],
        "experimentation_suggestions": [],
        "stop_loss_signals": [],
        "cooling_advice": {},
    },
    output_schema=_object(
        decision_nature=_strings("type", "core_conflict", "key_uncertainty"),
        comparison_matrix=_array(_strings(
            "option",
            "short_term_gain",
            "medium_term_risk",
            "long_term_ceiling",
            "irreversibility",
            "exit_path",
            "emotional_sustainability",
        )),
        risk_warnings=_array(_strings("option", "underestimated_risk", "why_it_is_dangerous")),
        experimentation_suggestions=_array(_strings("option", "test_method", "cost", "timeframe")),
        stop_loss_signals=_array(_strings("option", "signal", "action")),
        cooling_advice=_object(
            emotional_bias_detected=_string(),
            recommended_wait_time=_string(),
            recheck_questions=_array(_string()),
        ),
    ),
    normalize=DecisionPathResult.from_raw,
)

COST_CALC: ToolConfig[str, CostCalcResult] = ToolConfig(
    id="COST_CALC",
    title="因果发票",
    description="计算选择背后的隐性代价和灵魂损耗。",
    system_prompt=build_structured_prompt(
        "你是一个‘恶魔会计师’。为用户的人生选择开具一张‘因果发票’。计算灵魂、尊严、时间、健康等隐性货币。",
        '{ "invoiceId": "#INV-666", "currencyUnit": "...", "lineItems": [{ "category": "...", "description": "...", "cost": "..." }], "totalCost": "...", "finePrint": "..." }',
        "必须用简体中文。讽刺、黑色幽默。",
    ),
    build_user_prompt=lambda choice: f'客户选择："{choice}"。请开具发票。',
    expected_shape={
        "invoiceId": "string",
        "currencyUnit": "string",
        "lineItems": [],
        "totalCost": "string",
        "finePrint": "string",
    },
    output_schema=_object(
        invoiceId=_string(),
        currencyUnit=_string(),
        lineItems=_array(_strings("category", "description", "cost")),
        totalCost=_string(),
        finePrint=_string(),
    ),
    normalize=CostCalcResult.from_raw,
)

DECEPTION: ToolConfig[str, DeceptionResult] = ToolConfig(
    id="DECEPTION",
    title="红丸终端",
    description="撕碎自我欺骗的幻象，直面残酷真相。",
    system_prompt=build_structured_prompt(
        "你是一个‘红丸终端’(Red Pill Terminal)。你的任务是打破用户的自我欺骗矩阵。",
        '{ "bluePillNarrative": "...", "redPillTruth": "...", "glitchFactor": 80, "systemFailureLog": ["..."], "realityPatch": "..." }',
        "必须用简体中文。对比‘美好的谎言’和‘残酷的真相’。",
    ),
    build_user_prompt=lambda narrative: f'解析这个叙事："{narrative}"。揭露真相。',
    expected_shape={
        "bluePillNarrative": "string",
        "redPillTruth": "string",
        "glitchFactor": 0,
        "systemFailureLog": [],
        "realityPatch": "string",
    },
    output_schema=_object(
        bluePillNarrative=_string(),
        redPillTruth=_string(),
        glitchFactor=_number(),
        systemFailureLog=_array(_string()),
        realityPatch=_string(),
    ),
    normalize=DeceptionResult.from_raw,
)

EXTREME_SIM: ToolConfig[str, ExtremeSimResult] = ToolConfig(
    id="EXTREME_SIM",
    title="混沌计算器",
    description="模拟微小坏习惯引发的灾难性后果。",
    system_prompt=build_structured_prompt(
        "你是一个‘混沌效应计算器’。将用户的微小坏习惯视为‘蝴蝶扇动翅膀’，推演其导致的级联灾难。",
        '{ "disasterLevel": "CAT 4", "currentImpact": "...", "cascadeTimeline": [{ "time": "...", "event": "...", "magnitude": 50 }], "finalCollapse": "...", "tippingPoint": "..." }',
        "必须用简体中文。逻辑滑坡要‘看似荒谬但符合混沌逻辑’。",
    ),
    build_user_prompt=lambda habit: f'坏习惯/诱因："{habit}"。推演蝴蝶效应。',
    expected_shape={
        "disasterLevel": "CAT 1",
        "currentImpact": "string",
        "cascadeTimeline": [],
        "finalCollapse": "string",
        "tippingPoint": "string",
    },
    output_schema=_object(
        disasterLevel=_string("CAT 1", "CAT 2", "CAT 3", "CAT 4", "CAT 5"),
        currentImpact=_string(),
        cascadeTimeline=_array(_object(time=_string(), event=_string(), magnitude=_number())),
        finalCollapse=_string(),
        tippingPoint=_string(),
    ),
    normalize=ExtremeSimResult.from_raw,
)

JURY: ToolConfig[str, JuryResult] = ToolConfig(
    id="JURY",
    title="原型议会",
    description="脑内不同欲望人格对议题进行投票辩论。",
    system_prompt=build_structured_prompt(
        "你是一个‘原型议会’。脑内的不同欲望化身为议员（如：贪婪、恐惧、道德），对用户的决定进行辩论。",
        '{ "councilName": "...", "chaosMeter": 50, "jurors": [{ "archetype": "...", "icon": "🤡", "stance": "SUPPORT", "intensity": 5, "monologue": "..." }], "finalDecree": "..." }',
        "必须用简体中文。风格：极乐迪斯科 (Disco Elysium)。",
    ),
    build_user_prompt=lambda decision: f'议题："{decision}"。召开紧急会议。',
    expected_shape={
        "councilName": "string",
        "chaosMeter": 0,
        "jurors": [],
        "finalDecree": "string",
    },
    output_schema=_object(
        councilName=_string(),
        chaosMeter=_number(),
        jurors=_array(_object(
            archetype=_string(),
            icon=_string(),
            stance=_string("SUPPORT", "OPPOSE", "ABSTAIN"),
            intensity=_number(),
            monologue=_string(),
        )),
        finalDecree=_string(),
    ),
    normalize=JuryResult.from_raw,
)

_MOVE = _object(name=_string(), content=_string(), damage=_number())

CYBER_DEBATE: ToolConfig[str, DebateResult] = ToolConfig(
    id="CYBER_DEBATE",
    title="认知角斗场",
    description="红蓝 AI 针对议题进行极限逻辑互搏。",
    system_prompt=build_structured_prompt(
        "你是一个‘认知角斗场’的解说员。模拟一场关于用户话题的激烈辩论 (Red Side vs Blue Side)。",
        '{ "topic": "...", "redFighter": { "name": "...", "style": "..." }, "blueFighter": { "name": "...", "style": "..." }, "rounds": [{ "roundName": "Round 1", "redMove": { "name": "...", "content": "...", "damage": 50 }, "blueMove": { "name": "...", "content": "...", "damage": 40 } }], "winner": "RED", "fatalityMove": "..." }',
        "必须用简体中文。必须有3个回合。每个招式要有伤害值。",
    ),
    build_user_prompt=lambda topic: f'开启辩论角斗。话题："{topic}"。',
    expected_shape={
        "topic": "string",
        "redFighter": {},
        "blueFighter": {},
        "rounds": [],
        "winner": "DRAW",
        "fatalityMove": "string",
    },
    output_schema=_object(
        topic=_string(),
        redFighter=_strings("name", "style"),
        blueFighter=_strings("name", "style"),
        rounds=_array(_object(roundName=_string(), redMove=_MOVE, blueMove=_MOVE)),
        winner=_string("RED", "BLUE", "DRAW"),
        fatalityMove=_string(),
    ),
    normalize=DebateResult.from_raw,
)

CODE_ARCH: ToolConfig[str, CodeArchResult] = ToolConfig(
    id="CODE_ARCH",
    title="数字遗迹博物馆",
    description="像考古一样分析陈旧代码的历史层次。",
    system_prompt=build_structured_prompt(
        "你是一个‘数字遗迹博物馆’的馆长。对‘烂代码’进行考古鉴定。",
        '{ "carbonDating": "...", "techStackLayer": "...", "authorProfile": { "mentalState": "...", "caffeineLevel": "...", "hairLossRisk": "..." }, "spaghettiIndex": 80, "excavationReport": "...", "fossilFaults": [], "curatorNote": "..." }',
        "必须用简体中文。毒舌点评，考古隐喻。",
    ),
    build_user_prompt=lambda code: f"鉴定这段代码遗物：\n{code}",
    expected_shape={
        "carbonDating": "string",
        "techStackLayer": "string",
        "authorProfile": {},
        "spaghettiIndex": 0,
        "excavationReport": "string",
        "fossilFaults": [],
        "curatorNote": "string",
    },
    output_schema=_object(
        carbonDating=_string(),
        techStackLayer=_string(),
        authorProfile=_strings("mentalState", "caffeineLevel", "hairLossRisk"),
        spaghettiIndex=_number(),
        excavationReport=_string(),
        fossilFaults=_array(_string()),
        curatorNote=_string(),
    ),
    normalize=CodeArchResult.from_raw,
)

DEVILS_ADVOCATE: ToolConfig[str, DevilsResult] = ToolConfig(
    id="DEVILS_ADVOCATE",
    title="逻辑异端裁判所",
    description="对你的观点进行残酷的逻辑刑讯逼供。",
    system_prompt=build_structured_prompt(
        "你是一个中世纪的‘逻辑异端裁判所’的大法官。对用户的观点进行‘逻辑审判’。",
        '{ "verdict": "...", "logicalCrimes": [{ "name": "...", "description": "...", "sentence": "..." }], "tortureSession": [{ "tool": "...", "method": "...", "outcome": "..." }], "forcedConfession": "...", "sanityScore": 50 }',
        "必须用简体中文。把逻辑谬误比作异端罪行。",
    ),
    build_user_prompt=lambda opinion: f'把这个观点带上审判庭："{opinion}"',
    expected_shape={
        "verdict": "string",
        "logicalCrimes": [],
        "tortureSession": [],
        "forcedConfession": "string",
        "sanityScore": 0,
    },
    output_schema=_object(
        verdict=_string(),
        logicalCrimes=_array(_strings("name", "description", "sentence")),
        tortureSession=_array(_strings("tool", "method", "outcome")),
        forcedConfession=_string(),
        sanityScore=_number(),
    ),
    normalize=DevilsResult.from_raw,
)

CONCEPT_STITCHER: ToolConfig[StitcherInput, dict[str, Any]] = ToolConfig(
    id="CONCEPT_STITCHER",
    title="独角兽孵化器",
    description="强行缝合无关概念，生成荒诞商业计划书。",
    system_prompt=build_structured_prompt(
        "你是一名疯狂的硅谷VC。强行缝合两个无关概念，生成荒诞商业计划书。",
        '{ "startupName": "...", "tagline": "...", "userPersona": { "name": "...", "description": "...", "desire": "..." }, "revenueModel": "...", "growthHack": "...", "vcVerdict": "...", "unicornProbability": 50 }',
        "必须用简体中文。风格浮夸，充满创投圈黑话。",
    ),
    build_user_prompt=lambda i: f'强制缝合这两个概念："{i.term_a}" + "{i.term_b}"。生成项目路演材料。',
    expected_shape={
        "startupName": "string",
        "tagline": "string",
        "userPersona": {},
        "revenueModel": "string",
        "growthHack": "string",
        "vcVerdict": "string",
        "unicornProbability": 0,
    },
    output_schema=_object(
        startupName=_string(),
        tagline=_string(),
        userPersona=_strings("name", "description", "desire"),
        revenueModel=_string(),
        growthHack=_string(),
        vcVerdict=_string(),
        unicornProbability=_number(),
    ),
)

BUILTIN_TOOLS: tuple[ToolConfig[Any, Any], ...] = (
    DEVILS_ADVOCATE,
    CYBER_DEBATE,
    SUBTEXT,
    DECISION_PATH,
    ANTI_LIFE,
    CONCEPT_STITCHER,
    CODE_ARCH,
    COST_CALC,
    BIAS_DETECTOR,
    WORLD_SIM,
    EGO_BOUNDARY,
    LANG_SMELL,
    DECEPTION,
    EXTREME_SIM,
    JURY,
)
