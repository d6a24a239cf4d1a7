"""Static metadata describing Quiz Maker."""

APP_NAME = "Quiz Maker"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Maker lets you author quizzes with multiple-choice, true/false and short-answer "
    "questions, store them on disk, run attempts and grade the outcome."
)

HELP_TEXT = (
    "Quizzes can be authored as .txt files using the import format. An optional header block "
    "sets the quiz metadata, then each question is its own block:\n\n"
    "TITLE: Angles\nAUTHOR: Ms. Rivera\nTIMELIMIT: 10\nPASSING: 60\n\n"
    "Q: What is $30^o$ in radians?\n"
    "A: \\frac{\\pi}{2}\nB: \\frac{\\pi}{6}\nC: \\frac{\\pi}{3}\n"
    "CORRECT: B\nMARKS: 2\n\n"
    "Q: A right angle measures 90 degrees.\nTYPE: TF\nCORRECT: True\n\n"
    "Q: Name the angle that measures exactly 180 degrees.\nTYPE: SA\nCORRECT: straight"
)
