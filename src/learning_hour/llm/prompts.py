"""Prompt templates for LLM calls."""

SESSION_SYSTEM_PROMPT = """You are an experienced Technical Coach who designs Learning Hours: short, structured practice sessions where developers build technical excellence skills through hands-on coding. You respond with JSON only."""


SESSION_PROMPT = """Create a Learning Hour session on "{topic}" that enables deliberate practice of technical excellence skills.

CONTEXT: Learning Hours follow the 4C Learning Model (Connect -> Concept -> Concrete -> Conclusion) and focus on timeless practices: TDD, refactoring, clean code, evolutionary design, pairing/mobbing, and CI/CD.

CRITICAL REQUIREMENTS:
- Focus on DELIBERATE PRACTICE: participants write code, not just discuss concepts
- Connect to participants' REAL WORK with examples they will meet in their codebases
- Break complex practices into small, practicable MICRO-SKILLS
- Create PSYCHOLOGICAL SAFETY so participants experiment and learn from mistakes
- Give Technical Coaches clear facilitation guidance

Design the session following the 4C Model:

1. CONNECT (5-10 minutes): activate prior knowledge of {topic}, surface current pain points
2. CONCEPT (15-20 minutes): present {topic} with a live coding demo and before/after code
3. CONCRETE (20-30 minutes): pairs or ensemble practice ONE micro-skill related to {topic}, test-first where applicable
4. CONCLUSION (5-10 minutes): share insights and commit to one application in current work

MIRO BOARD REQUIREMENTS for {style} style:
- Clear sections for each 4C phase
- Sticky notes with facilitation content
- Code example frames
- Timer indicators for each activity

Return ONLY valid JSON:
{{
  "topic": "{topic}",
  "sessionOverview": "2-3 sentences explaining what participants will practice, why it matters, and how it connects to daily work",
  "learningObjectives": [
    "REMEMBER: Define key terminology and concepts related to {topic}",
    "IDENTIFY: Recognize situations in their codebase where {topic} applies",
    "DEMONSTRATE: Apply specific refactoring/coding techniques for {topic}",
    "EVALUATE: Assess code quality improvements from addressing {topic}"
  ],
  "activities": [
    {{
      "title": "Connect: {topic} in Our Codebase",
      "duration": "8 minutes",
      "description": "Pairs share real examples of {topic} from their current projects",
      "instructions": ["Form pairs", "Share one recent example of {topic}", "Discuss the impact on development speed"]
    }},
    {{
      "title": "Concept: Understanding {topic}",
      "duration": "15 minutes",
      "description": "Live coding demonstration of {topic} patterns and solutions",
      "instructions": ["Watch the demonstration", "Identify the code smells together", "Note the testing approach"]
    }},
    {{
      "title": "Concrete: Refactoring {topic} Exercise",
      "duration": "25 minutes",
      "description": "Hands-on practice refactoring code that exhibits {topic}",
      "instructions": ["Write a characterization test", "Apply small, safe refactoring steps", "Rotate driver/navigator every 5 minutes"]
    }},
    {{
      "title": "Conclusion: Applying to Our Work",
      "duration": "7 minutes",
      "description": "Reflect on learning and commit to specific actions",
      "instructions": ["Share one 'aha' moment", "Write a commitment: 'This week I will...'"]
    }}
  ],
  "discussionPrompts": [
    "Where in your current codebase would addressing {topic} have the biggest impact?",
    "What prevents us from addressing {topic} when we see it?",
    "How does {topic} affect our ability to deliver value quickly and safely?",
    "How might TDD help us avoid {topic} from the start?"
  ],
  "keyTakeaways": [
    "Small, incremental refactorings are safer than big rewrites",
    "Tests give us confidence to refactor without breaking functionality",
    "Regular practice helps us recognize and prevent {topic}"
  ],
  "miroContent": {{
    "boardTitle": "Learning Hour: {topic} - Deliberate Practice Session",
    "style": "{style}",
    "sections": [
      {{"title": "Welcome & Session Overview", "type": "text_frame", "content": "Today's Learning Hour: {topic}\\n\\n[Session overview from above]"}},
      {{"title": "Learning Objectives", "type": "sticky_notes", "color": "light_blue", "items": ["[Each learning objective from above on separate sticky]"]}},
      {{"title": "CONNECT: Your Experience (8 min)", "type": "sticky_notes", "color": "light_yellow", "items": ["In pairs: Share a recent encounter with {topic}", "What made it challenging?"]}},
      {{"title": "CONCEPT: Live Demo (15 min)", "type": "text_frame", "content": "Watch for:\\n- Code smells indicating {topic}\\n- Step-by-step refactoring approach"}},
      {{"title": "CONCRETE: Coding Exercise (25 min)", "type": "sticky_notes", "color": "light_green", "items": ["1. Write characterization test", "2. Apply small refactorings", "3. Run tests after each change"]}},
      {{"title": "Code Exercise Setup", "type": "code_examples", "language": "java", "beforeCode": "// Starting code with {topic} issue\\n// [Realistic example that participants might see in their work]", "afterCode": "// One possible refactored solution\\n// [Clean, testable code following SOLID principles]"}},
      {{"title": "CONCLUSION: Apply It (7 min)", "type": "sticky_notes", "color": "light_pink", "items": ["Share your 'aha' moment", "Write commitment: 'This week I will...'"]}},
      {{"title": "Discussion Questions", "type": "sticky_notes", "color": "light_orange", "items": ["[Each discussion prompt from above]"]}},
      {{"title": "Key Takeaways", "type": "sticky_notes", "color": "light_purple", "items": ["[Each takeaway from above]"]}},
      {{"title": "Facilitator Notes", "type": "text_frame", "content": "Tips for Technical Coaches:\\n- Emphasize practice over perfection\\n- Time-box strictly"}}
    ]
  }}
}}

Section types are limited to text_frame, sticky_notes, code_block and code_examples.

Style-specific adaptations:
- slide: optimize for screen sharing with clear visual progression through the 4C phases
- vertical: scrollable sections with detailed instructions visible at once
"""


CODE_EXAMPLE_PROMPT = """Create a comprehensive, production-like code example for a Learning Hour on "{topic}" in {language}.

CONTEXT: The example is used in the Concrete phase of a Learning Hour where participants practice refactoring through hands-on coding. It must feel realistic and connect to actual problems developers face.

REQUIREMENTS:
1. A REALISTIC scenario developers would encounter in production codebases
2. MULTIPLE refactoring steps (3-5 steps), not just before/after
3. SPECIFIC code smells addressed at each step
4. TEST CODE alongside production code
5. FACILITATION notes for Technical Coaches
6. Each step small and safe; the progression tells a story of incremental improvement
7. Use {language}-specific idioms and best practices

IMPORTANT: Return ONLY valid JSON with no additional text or markdown formatting.

{{
  "topic": "{topic}",
  "language": "{language}",
  "context": "Brief description of the realistic scenario",
  "problemStatement": "What specific problem does this code exhibit that makes it a good Learning Hour example?",
  "learningHourConnection": "How does practicing with this example build skills that transfer to daily work?",
  "refactoringSteps": [
    {{
      "stepNumber": 1,
      "description": "Extract Method - Isolate discount calculation logic",
      "code": "// Production code after this step",
      "testCode": "// Test code that validates this step",
      "codeSmells": ["Long Method", "Feature Envy"],
      "improvements": ["Single Responsibility", "Improved testability"],
      "facilitationTip": "Ask pairs: 'What makes this method easier to test now?'"
    }},
    {{
      "stepNumber": 2,
      "description": "Replace Conditional with Polymorphism",
      "code": "// Code after introducing a strategy",
      "testCode": "// Tests for the new abstraction",
      "codeSmells": ["Switch statements", "Duplicate logic"],
      "improvements": ["Open/Closed Principle", "Easier to extend"],
      "facilitationTip": "Pause and ask: 'What new cases could we add without changing existing code?'"
    }}
  ],
  "additionalExercises": ["Add a new case using the refactored structure"],
  "facilitationNotes": {{
    "timeAllocation": "5 min code review, 15 min pair refactoring, 5 min group discussion",
    "commonMistakes": ["Refactoring everything at once instead of small steps"],
    "discussionPoints": ["Which step had the biggest impact on clarity?"],
    "pairProgrammingTips": ["Switch roles every 5 minutes using a timer"]
  }}
}}
"""


def build_session_prompt(topic: str, style: str = "slide") -> str:
    """Render the session prompt for a topic and board style."""
    return SESSION_PROMPT.format(topic=topic, style=style)


def build_code_example_prompt(topic: str, language: str = "java") -> str:
    """Render the code example prompt for a topic and language."""
    return CODE_EXAMPLE_PROMPT.format(topic=topic, language=language)
