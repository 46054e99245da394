from typing import List, Optional

from .models import CompletionRequest, Message

DEFAULT_DEBATE_SYSTEM = "You are a debate AI playing the role of {role}"
DEBATE_OPENING = "Debate the motion: {motion}"

TOPIC_KNOWLEDGE_PROMPT = """You are a debate research assistant. Generate comprehensive topic knowledge for the motion: "{motion}".

Provide:
1. Key definitions and interpretations
2. 3-4 major arguments for each side
3. Real-world examples and case studies
4. Statistical data and evidence
5. Common rebuttals and responses

Format as structured text with clear sections for easy reference during prep."""

PREP_MATERIALS_PROMPT = """You are an AI debate coach preparing materials for the {side} side on: "{motion}".

Generate:
1. 3 strong arguments with mechanisms and impacts
2. Potential rebuttals to opposition arguments
3. Key statistics and examples
4. Strategic advice for {format} format

Keep it concise but comprehensive - this is prep material for quick reference."""

SPEECH_ROLES = {
    "constructive": (
        "You are the {speaker_role} arguing for the {team_side} side. "
        "Present your team's main case with clear arguments, mechanisms, and impacts."
    ),
    "extension": (
        "You are the {speaker_role}. Your job is to extend the {team_side} case "
        "through new impacts and mechanisms, while also providing rebuttals to the opposition."
    ),
    "rebuttal": (
        "You are the {speaker_role}. Focus on weighing mechanisms, crystallizing the debate, "
        "and explaining why your side wins. Provide strong rebuttals and impact comparison."
    ),
}

SPEECH_PROMPT = """{role_description}

Motion: "{motion}"
Format: {format}

Previous speeches:
{debate_history}

Deliver a {speech_type} speech. Use advanced debate techniques:
1. Clear signposting and structure
2. Mechanized arguments with logical reasoning
3. Strong impacts and implications
4. Address opponent arguments where relevant
5. Use evidence and examples effectively

Style: {difficulty} level debate (adjust complexity accordingly)"""

JUDGE_SPEECH_PROMPT = """You are an expert debate judge evaluating this speech:

Speaker: {speaker}
Type: {speech_type}
Content: {content}

Rate on three categories (0-100):
1. Content: Argument quality, logic, evidence, relevance
2. Style: Clarity, persuasiveness, structure, delivery
3. Strategy: Role fulfillment, clash engagement, debate awareness

Provide scores and brief explanations in JSON format:
{{
  "content": score,
  "style": score,
  "strategy": score,
  "comments": "Brief feedback explaining the scores"
}}"""

FINAL_RFD_PROMPT = """You are a world-class debate adjudicator providing a Reason for Decision (RFD) for this {format} debate on "{motion}".

All speeches:
{all_speeches}

Provide a comprehensive RFD including:
1. Analysis of each team's case and strategy
2. Key clashes and how they were resolved
3. Impact comparison and weighing
4. Team rankings with justification
5. Individual speaker feedback

Be specific about argumentation quality, strategic choices, and technical debate skills."""

GOVERNMENT_TEAMS = ("OG", "CG")


def _single_turn(prompt: str, max_tokens: int, temperature: float) -> CompletionRequest:
    return CompletionRequest(
        messages=[Message(role="user", content=prompt)],
        max_output_tokens=max_tokens,
        temperature=temperature,
    )


def build_debate_request(
    motion: str,
    role: str,
    messages: Optional[List[Message]] = None,
    system_prompt: Optional[str] = None,
    max_tokens: int = 500,
    temperature: float = 0.8,
) -> CompletionRequest:
    """
    Build a debate turn.

    The caller's messages, when given, are the whole conversation after the
    system turn; otherwise the model is asked to open on the motion.
    Messages keep their order, role and content; any other keys a client
    sends on a message are dropped, since the chat API takes only those two.
    """
    system = system_prompt or DEFAULT_DEBATE_SYSTEM.format(role=role)
    history = list(messages) if messages else [
        Message(role="user", content=DEBATE_OPENING.format(motion=motion))
    ]
    return CompletionRequest(
        messages=[Message(role="system", content=system)] + history,
        max_output_tokens=max_tokens,
        temperature=temperature,
    )


def build_topic_knowledge_request(motion: str) -> CompletionRequest:
    return _single_turn(TOPIC_KNOWLEDGE_PROMPT.format(motion=motion), 800, 0.7)


def team_side(user_team: str) -> str:
    """OG and CG sit on Government; every other team code is Opposition."""
    return "Government" if user_team in GOVERNMENT_TEAMS else "Opposition"


def build_prep_materials_request(motion: str, user_team: str, format: str) -> CompletionRequest:
    prompt = PREP_MATERIALS_PROMPT.format(side=team_side(user_team), motion=motion, format=format)
    return _single_turn(prompt, 600, 0.8)


def speech_role_description(speech_type: str, speaker_role: str, team_side: str) -> str:
    # Unknown speech types get no role description.
    template = SPEECH_ROLES.get(speech_type)
    if template is None:
        return ""
    return template.format(speaker_role=speaker_role, team_side=team_side)


def build_speech_request(
    motion: str,
    speaker_role: str,
    speech_type: str,
    team_side: str,
    format: str,
    debate_history: str,
    difficulty: str,
) -> CompletionRequest:
    prompt = SPEECH_PROMPT.format(
        role_description=speech_role_description(speech_type, speaker_role, team_side),
        motion=motion,
        format=format,
        debate_history=debate_history,
        speech_type=speech_type,
        difficulty=difficulty,
    )
    return _single_turn(prompt, 700, 0.8)


def build_judge_request(speaker: str, speech_type: str, content: str) -> CompletionRequest:
    prompt = JUDGE_SPEECH_PROMPT.format(speaker=speaker, speech_type=speech_type, content=content)
    return _single_turn(prompt, 300, 0.7)


def build_final_rfd_request(motion: str, format: str, all_speeches: str) -> CompletionRequest:
    prompt = FINAL_RFD_PROMPT.format(motion=motion, format=format, all_speeches=all_speeches)
    return _single_turn(prompt, 1000, 0.7)
