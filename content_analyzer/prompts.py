"""Prompt template for the Gemini content analysis."""

from .metadata import PageMetadata

ANALYSIS_PROMPT_TEMPLATE = """
Please analyze the following web content comprehensively. The content is from: {url}

Page Title: {title}
Page Description: {description}

Content to analyze:
{content}

Please provide a detailed analysis in the following JSON format:

{{
  "themes": [
    "List the main themes and topics discussed in the content"
  ],
  "sentiment": {{
    "overall": "positive/negative/neutral",
    "tone": "describe the overall tone (e.g., professional, casual, academic, persuasive, etc.)",
    "confidence": "high/medium/low"
  }},
  "summary": "Provide a comprehensive summary of the content (3-4 paragraphs, written naturally as humans would write, capturing all important points and nuances)",
  "keyInsights": [
    "List 5-7 key insights, findings, or important points from the content",
    "Each insight should be detailed and meaningful",
    "Include specific details and context where relevant"
  ],
  "intentions": [
    "What appears to be the author's main intentions or purposes"
  ],
  "targetAudience": "Who seems to be the intended audience for this content",
  "contentType": "What type of content this is (article, blog post, news, academic paper, etc.)",
  "expertise": "What level of expertise or authority does the content demonstrate",
  "actionablePoints": [
    "Any actionable advice, recommendations, or takeaways for readers"
  ]
}}

Make sure your analysis is thorough, accurate, and provides genuine value. The summary should be well-written and comprehensive, not just a brief overview."""


def build_analysis_prompt(url: str, metadata: PageMetadata, content: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(
        url=url,
        title=metadata.title,
        description=metadata.description,
        content=content,
    )
