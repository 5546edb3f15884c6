from __future__ import annotations

import textwrap
from typing import Iterable

SYSTEM_PROMPT = (
    "You are an expert AI Ethicist and Data Scientist specializing in fairness, "
    "accountability, and transparency in machine learning. "
    "Return ONLY valid JSON that matches the provided schema."
)

ETHICS_STATEMENT_WORDS = (400, 500)
MIN_METRICS = 3
MITIGATION_COUNT = 2


def build_prompt(description: str, attributes: Iterable[str]) -> str:
    """Audit instruction embedding the description and the attribute list."""
    attrs = ", ".join(attributes)
    lo, hi = ETHICS_STATEMENT_WORDS
    body = textwrap.dedent(
        f"""
        Your task is to conduct a comprehensive bias audit.

        **Dataset/Model Description:**
        {description.strip()}

        **Protected Attributes to Analyze:**
        {attrs}

        **Instructions:**
        1. **Analyze Potential Biases:** Based on the provided description and protected attributes, identify potential sources and types of bias (e.g., selection bias, representation bias, historical bias).
        2. **Quantitative Fairness Metrics:** Generate realistic, hypothetical scores for at least {MIN_METRICS} relevant quantitative fairness metrics (e.g., Demographic Parity, Equal Opportunity, Predictive Equality). For each metric, provide scores for different subgroups within the protected attributes, one score per group label. Ensure the scores clearly illustrate potential disparities. The scores must be between 0.0 and 1.0.
        3. **Bias Mitigation Strategies:** Propose exactly {MITIGATION_COUNT} concrete mitigation strategies (e.g., re-sampling, re-weighing, adversarial de-biasing, post-processing adjustments). For each strategy, describe it and provide a hypothetical "before" and "after" comparison of a relevant fairness metric, using the same groups in both lists.
        4. **Dataset Recommendations:** Provide a list of actionable recommendations for improving the dataset itself to reduce bias.
        5. **Real-World Implications:** Write a paragraph on the potential real-world, negative consequences if the identified biases are not addressed.
        6. **Ethics Framework:** Propose a relevant ethics framework (e.g., based on principles like Fairness, Transparency, Accountability) with a title and a few key principles and their descriptions.
        7. **Ethics Statement:** Draft a formal ethics statement of {lo}-{hi} words that could be used for this model.
        8. **References:** List academic-style references related to AI bias or fairness in this domain.

        Provide your entire analysis in a single, valid JSON object that strictly adheres to the provided schema. Do not include any text, markdown, or explanations outside of the JSON object itself.
        """
    )
    return body.strip() + "\n"
