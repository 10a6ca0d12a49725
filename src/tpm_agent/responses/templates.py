# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/tpm_agent/responses/templates.py

"""
Jinja2 templates for issue comments.
"""

from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined


class TemplateRegistry:
    """Registry of Jinja2 templates used to build issue comments."""

    COMMENT_TEMPLATE = """## 🤖 TPM Agent Analysis

This issue was analyzed using **{{ method }}**.

### Analysis Results

- **Type**: {{ classification.type }}
- **Priority**: {{ classification.priority }}
{% if classification.topics %}
- **Topics**: {{ classification.topics | join(', ') }}
{% endif %}
{% if show_summary %}
- **Summary**: {{ classification.summary }}
{% endif %}

### Next Steps

{% if classification.type == 'bug' %}
1. Reproduce the problem using the steps described in this issue
2. Collect logs, error messages and environment details (OS, TPM version, container image)
3. Identify the root cause and add a regression test
4. Submit a fix and reference this issue in the pull request
{% elif classification.type == 'feature' %}
1. Review the request and confirm the expected behavior with the reporter
2. Assess feasibility and impact on existing functionality
3. Draft a design or implementation plan
4. Break the work into tasks and schedule it
{% else %}
1. Review the question and gather any missing context
2. Check the existing documentation and related issues
3. Provide an answer or point to the relevant resources
{% endif %}
{% if additional_info %}

### Additional Information

{% if 'TPM' in classification.topics %}
**TPM**: Trusted Platform Module operations can be checked with this action's `info`, `check` and `validate` operations. Include your TPM version and firmware details when reporting hardware-related problems.

{% endif %}
{% if 'Docker' in classification.topics %}
**Docker**: This action runs in a container. Include the image tag, the Docker version and any build or runtime output when reporting container problems.

{% endif %}
{% if 'OpenAI' in classification.topics or 'Azure' in classification.topics %}
**Azure OpenAI**: AI-assisted analysis requires the `azure_openai_api_key` and `azure_openai_endpoint` inputs. Check the deployment name and API version if analysis falls back to keyword matching.

{% endif %}
{% endif %}
---
*This comment was generated automatically by TPM Agent using {{ method }}.*
"""

    # Topics that have a block in the Additional Information section
    ADDITIONAL_INFO_TOPICS = frozenset({"TPM", "Docker", "OpenAI", "Azure"})

    def __init__(self):
        """Initialize template registry with Jinja2 environment."""
        self.env = Environment(loader=BaseLoader(), undefined=StrictUndefined)
        self.env.trim_blocks = True
        self.env.lstrip_blocks = True

    def render_comment(self, context: Dict[str, Any]) -> str:
        """
        Render the issue comment.

        Args:
            context: Template context variables

        Returns:
            Rendered comment
        """
        template = self.env.from_string(self.COMMENT_TEMPLATE)
        return template.render(**context)
