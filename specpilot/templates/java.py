"""
Java providers.

Framework variants: spring-boot
"""

from typing import Dict, List, Optional

from specpilot.templates.base import TemplateProvider


class JavaProvider(TemplateProvider):
    """Generic Maven/Gradle project."""

    @property
    def language(self) -> str:
        return "java"

    @property
    def display_name(self) -> str:
        return "Java"

    @property
    def build_command(self) -> str:
        return "mvn package"

    @property
    def source_tree(self) -> str:
        return (
            "src/main/java/      # Application sources\n"
            "src/main/resources/ # Configuration and resources\n"
            "src/test/java/      # JUnit tests\n"
        )

    def dependencies(self) -> Dict[str, List[str]]:
        return {"runtime": [], "development": ["junit-jupiter"]}


class SpringBootProvider(JavaProvider):
    """Spring Boot service."""

    @property
    def framework(self) -> Optional[str]:
        return "spring-boot"

    def dependencies(self) -> Dict[str, List[str]]:
        return {
            "runtime": ["spring-boot-starter-web", "spring-boot-starter-actuator"],
            "development": ["spring-boot-starter-test"],
        }

    def framework_notes(self) -> List[str]:
        return [
            "Controllers, services and repositories are separate layers",
            "Configuration is externalised in application.yml profiles",
            "Health and metrics are exposed through Actuator",
        ]
