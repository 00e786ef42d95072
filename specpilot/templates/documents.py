"""
Fixed inline templates.

These documents have the same structure for every language; only the
substituted values change. project.yaml and architecture.md are not
here; they come from the language/framework providers.
"""

from typing import Dict

from specpilot.documents import DocumentKind
from specpilot.templates.base import FOOTER, front_matter


README_TEMPLATE = front_matter("Specifications README") + """
# {{ project_name }} Specifications

This folder contains structured documentation for {{ project_name }}.

## Quick Start: Populate Your Specs

Your specs are generated but mostly empty. Follow these steps to fill them with AI-assisted details:

### Step 1: Copy the Onboarding Prompt
1. Open [`development/prompts.md`](development/prompts.md).
2. Find the "First-Use Onboarding Prompt" section.
3. Copy the entire fenced block.

### Step 2: Paste into Your AI Agent
1. In your IDE, open the AI chat.
2. Paste the prompt and run it.
3. The AI will analyze your codebase and populate all spec files.

### Step 3: Review & Iterate
- Check the generated content in each spec file.
- Refine as needed (e.g., add missing details).
- Run `specpilot validate` to ensure consistency.

## File Structure
- `project/`: Metadata and requirements
- `architecture/`: Design and APIs
- `planning/`: Tasks and roadmap
- `quality/`: Testing
- `development/`: Docs and prompts

## Commands
```bash
# Validate your specs
specpilot validate

# Fold a new description into the specs
specpilot specify "what you want to build"
```

For AI guidelines and prompt history, see [`development/prompts.md`](development/prompts.md).
"""


REQUIREMENTS_TEMPLATE = front_matter("Requirements") + """
# {{ project_name }} Requirements

## Project Overview
{{ description }}

## Functional Requirements
- REQ-001: [TODO: Describe the first functional requirement]

## Non-Functional Requirements
- [TODO: Performance, security and availability targets]

## User Stories
- As a [role], I want [goal] so that [benefit].

## Cross-References
- Architecture: ../architecture/architecture.md
- API: ../architecture/api.yaml
- Project config: ../project/project.yaml
""" + FOOTER


API_TEMPLATE = """# {{ project_name }} API Specification
# meta: project={{ project_name }} language={{ language }} framework={{ framework }} updated={{ last_updated }}
openapi: 3.0.3
info:
  title: {{ (project_name ~ " API") | quote }}
  description: {{ description | quote }}
  version: 1.0.0
paths: {}
"""


TASKS_TEMPLATE = front_matter("Tasks") + """
# {{ project_name }} Task Management

## Project Status: In Progress

## Current Sprint
- [ ] TASK-001: Setup project foundation
- [ ] TASK-002: Implement core features

## In Progress
_Nothing in progress yet._

## Completed
- [x] Generate specification structure

## Cross-References
- Roadmap: ./roadmap.md
- Requirements: ../project/requirements.md
- Project config: ../project/project.yaml
""" + FOOTER


ROADMAP_TEMPLATE = front_matter("Roadmap") + """
# {{ project_name }} Development Roadmap

## Project Phases

### Phase 1: Foundation
- [x] Project initialization
- [ ] Core development

### Phase 2: Hardening
- [ ] Test coverage and documentation
- [ ] First release

## Cross-References
- Tasks: ./tasks.md
- Requirements: ../project/requirements.md
""" + FOOTER


DOCS_TEMPLATE = front_matter("Development Docs") + """
# {{ project_name }} Development Documentation

## Getting Started
[TODO: Add development setup instructions for {{ language }}{% if framework %} / {{ framework }}{% endif %}]

## Contributors
{% for contributor in contributors %}
- {{ contributor }}
{% endfor %}

## Cross-References
- Context: ./context.md
- Roadmap: ../planning/roadmap.md
- Tasks: ../planning/tasks.md
- Project config: ../project/project.yaml
""" + FOOTER


CONTEXT_TEMPLATE = front_matter("Development Context") + """
# {{ project_name }} Development Context

## Project Memory
[TODO: Add project context and decisions]

## Cross-References
- Docs: ./docs.md
- Roadmap: ../planning/roadmap.md
- Project config: ../project/project.yaml
""" + FOOTER


PROJECT_PLAN_TEMPLATE = front_matter("Project Plan") + """
# {{ project_name }} Project Plan

## Project Overview
{{ description }}

**Owner**: {{ author }}

## Milestones
[TODO: Add project planning details]

## Cross-References
- Roadmap: ../planning/roadmap.md
- Tasks: ../planning/tasks.md
""" + FOOTER


PROMPTS_TEMPLATE = front_matter("Prompts Log") + """
# Development Prompts Log

## Overview
This file (prompts.md) contains ALL AI interactions for {{ project_name }}. Update .specs/prompts.md with every AI interaction.

**MANDATE**: Update with every AI interaction.

## First-Use Onboarding Prompt

After generating the `.specs` directory, use this prompt to have your AI agent populate all specification files with project-specific details while following established conventions:

~~~
You are onboarding as the specification co-pilot for this repository. We just initialized the .specs directory using SpecPilot. Your task is to inspect the codebase and populate all .specs files following these strict conventions:

**Conventions & Rules:**
1. **IDs**: Use semantic prefixes (REQ-, TASK-, ARCH-, TEST-, etc.) with zero-padded numbers (e.g., REQ-001, TASK-042)
2. **Status values**: Must be one of: not-started, in-progress, completed, blocked, deprecated
3. **Priority values**: Must be: critical, high, medium, low
4. **Dates**: Use ISO 8601 format (YYYY-MM-DD)
5. **YAML**: Use proper indentation (2 spaces), include all required fields
6. **Markdown**: Use ATX headers (#), fenced code blocks, and consistent formatting
7. **Traceability**: Link requirements to tasks, tasks to tests, architecture to implementation

**File Structure Standards:**

- `project/project.yaml`: name, version, description, tech_stack[], dependencies[], metadata
- `project/requirements.md`: ## Functional/Non-Functional Requirements with REQ-XXX IDs, priority, status
- `architecture/architecture.md`: ## Overview, Components, Data Flow, Tech Stack, Decisions (ADR format)
- `architecture/api.yaml`: OpenAPI 3.0 spec or endpoints list with methods, paths, descriptions
- `planning/tasks.md`: ## Backlog/In Progress/Completed with TASK-XXX, assignee, priority, dependencies
- `planning/roadmap.md`: ## Milestones with versions, dates, features, status
- `quality/tests.md`: ## Test Strategy, Test Cases (TEST-XXX), Coverage Goals, CI/CD integration
- `development/docs.md`: ## Getting Started, Architecture, API, Deployment, Contributing
- `development/context.md`: ## Project Context, Key Decisions, Known Issues, Future Considerations

**Your Process:**
1. Analyze the codebase: language, framework, structure, existing tests, dependencies
2. For each .specs file, generate content that:
   - Reflects the actual implementation state
   - Follows the conventions above exactly
   - Maintains internal consistency (cross-references work)
   - Scales appropriately to project size (small projects = concise specs, large = comprehensive)
3. Identify gaps: missing tests, undocumented APIs, unclear requirements, architectural debt
4. Propose actionable next steps in planning/tasks.md

**Output Format:**
For each file, provide the complete content in a markdown code block:
```markdown
// filepath: .specs/project/project.yaml
[full file content]
```

**Constraints:**
- Maintain the exact file paths and names from the .specs structure
- Don't invent features that don't exist in the code
- Flag uncertainties with TODO comments
- Keep descriptions clear, concise, and technical
- Ensure all IDs are unique within their domain

After populating all files, provide a summary of:
- What was discovered about the project
- What's documented vs. what's implemented
- Critical gaps or risks
- Recommended immediate actions

Begin your analysis now.
~~~

## Latest Entries

### Project Setup ({{ last_updated }})
**Prompt**: "Initialize specifications for {{ project_name }}"

**Context**: Generated by `specpilot init`

---

## Prompt History

| Date | User | Prompt Summary | Context |
|------|------|----------------|---------|
| YYYY-MM-DD | @username | Example prompt | Brief context or outcome |

## Common Commands

```bash
# Generate specs for a new project
specpilot init {{ project_name }}

# Validate spec files
specpilot validate
```

## AI Agent Guidelines

When working with AI agents on this codebase:
- Always reference relevant .specs files for context
- Update specifications before/after significant changes
- Use the conventions defined in the onboarding prompt
- Link code changes to tasks (TASK-XXX) and requirements (REQ-XXX)
- Keep development/context.md current with architectural decisions
- **RELEASE MANDATE**: Never commit, push, create tags, publish releases, or publish packages without explicit user consent and approval

## Cross-References
- Context: ./context.md
- Project config: ../project/project.yaml
""" + FOOTER


TESTS_TEMPLATE = front_matter("Test Strategy") + """
# {{ project_name }} Test Strategy

## Overview
[TODO: Add testing strategy and approach]

## Test Cases
- TEST-001: [TODO: First test case]

## Coverage Goals
[TODO: State the coverage target]

## Cross-References
- Requirements: ../project/requirements.md
- Project config: ../project/project.yaml
""" + FOOTER


SPEC_UPDATE_TEMPLATE = """---
fileID: spec-update-template
title: Spec Update Template
project: {{ project_name | quote }}
language: {{ language | quote }}
framework: {{ framework | quote }}
lastUpdated: {{ last_updated }}
sourceOfTruth: project/project.yaml
version: 1.0.0
contributors: [{{ contributors | map("quote") | join(", ") }}]
relatedFiles:
  - "project/project.yaml"
  - "development/prompts.md"
---

# Spec Update Template

## Purpose
This template provides a standardized format for updating the {{ project_name }} specification files within the .specs folder structure.

## Instructions

### 1. Update Front-matter
- Update `lastUpdated` field with current timestamp
- Increment `version` following semantic versioning
- Add your name to `contributors` array
- Update `relatedFiles` if dependencies change

### 2. Document Changes
- Clearly describe what was modified and why
- Reference related tasks or issues
- Update cross-references to maintain consistency

### 3. Validation
- Ensure YAML front-matter is valid
- Verify all cross-references use correct subfolder paths
- Check that version numbers are consistent across related files

## Subfolder Structure
- `project/` - Core project configuration and requirements
- `architecture/` - System design and API specifications
- `planning/` - Development planning and roadmaps
- `quality/` - Testing strategies and quality assurance
- `development/` - Development logs and prompt tracking

---
*Generated by SpecPilot on {{ current_date }}*
"""


INLINE_TEMPLATES: Dict[DocumentKind, str] = {
    DocumentKind.README: README_TEMPLATE,
    DocumentKind.REQUIREMENTS: REQUIREMENTS_TEMPLATE,
    DocumentKind.API: API_TEMPLATE,
    DocumentKind.TASKS: TASKS_TEMPLATE,
    DocumentKind.ROADMAP: ROADMAP_TEMPLATE,
    DocumentKind.DOCS: DOCS_TEMPLATE,
    DocumentKind.CONTEXT: CONTEXT_TEMPLATE,
    DocumentKind.PROJECT_PLAN: PROJECT_PLAN_TEMPLATE,
    DocumentKind.PROMPTS: PROMPTS_TEMPLATE,
    DocumentKind.TESTS: TESTS_TEMPLATE,
    DocumentKind.SPEC_UPDATE_TEMPLATE: SPEC_UPDATE_TEMPLATE,
}
