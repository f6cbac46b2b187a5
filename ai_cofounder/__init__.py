"""
AI Co-Founder - startup idea refinement service for students

Turns a one-line startup idea into a structured business plan bundle
and helps founders find co-founders with complementary skills.

Features:
- Business plan generation via LLM providers (Gemini, OpenAI) with mock fallback
- Validation assets (survey, landing page, ad copy)
- Co-founder directory with skill matching and filters
- Business plan documents and user accounts
"""

__version__ = "1.0.0"
__author__ = "AI Co-Founder Team"
