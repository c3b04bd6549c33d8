from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

DEFAULT_LANGUAGE_KEY = "html"


@dataclass(frozen=True)
class Language:
    """Display metadata for a single technology badge."""

    name: str
    icon_name: str
    class_name: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Language name must not be empty")
        if not self.icon_name:
            raise ValueError(f"Language {self.name!r} has an empty icon name")

    def to_dict(self) -> dict:
        """Wire form consumed by the frontend; className only when set."""
        data = {"name": self.name, "iconName": self.icon_name}
        if self.class_name is not None:
            data["className"] = self.class_name
        return data


# Maps badge keys to display names & icon identifiers
_LANGUAGE_DATA = (
    ("angular", Language("Angular", "angular")),
    ("astro", Language("Astro", "astro")),
    ("bootstrap", Language("Bootstrap", "bootstrap")),
    ("cloudflare", Language("Cloudflare", "cloudflare")),
    ("html", Language("HTML 5", "html")),
    ("javascript", Language("JavaScript", "javascript")),
    ("mysql", Language("MySQL", "mysql", class_name="bg-[#f6ece1]!")),
    ("wordpress", Language("Wordpress", "wordpress")),
    ("node", Language("Node.js", "node")),
    ("tailwind", Language("Tailwind CSS", "tailwind")),
    ("figma", Language("Figma", "figma")),
    ("firebase", Language("Firebase", "firebase")),
    ("markdown", Language("Markdown", "markdown")),
    ("php", Language("PHP", "php")),
    ("sass", Language("Sass", "sass")),
    ("ts", Language("TypeScript", "typescript")),
    ("git", Language("Git", "git")),
    ("css", Language("CSS", "css")),
    ("vercel", Language("Vercel", "vercel")),
    ("netlify", Language("Netlify", "netlify")),
    ("gatsby", Language("Gatsby", "gatsby")),
    ("windsurf", Language("Windsurf", "windsurf-logo")),
    ("cursor", Language("Cursor", "cursor-ia")),
    ("deepseek", Language("DeepSeek", "deepseek")),
    ("python", Language("Python", "python")),
    ("aws", Language("AWS", "aws")),
    ("postgresql", Language("PostgreSQL", "postgresql")),
    ("tensorflow", Language("TensorFlow", "tensorflow")),
    ("pytorch", Language("PyTorch", "pytorch")),
    ("matplotlib", Language("Matplotlib", "matplotlib")),
    ("seaborn", Language("Seaborn", "seaborn")),
    ("jupyter", Language("Jupyter", "jupyter")),
    ("r", Language("R", "r")),
    ("airbyte", Language("Airbyte", "airbyte")),
    ("dbt", Language("dbt", "dbt")),
    ("vscode", Language("VS Code", "vscode")),
    ("docker", Language("Docker", "docker")),
    ("kubernetes", Language("Kubernetes", "kubernetes")),
    ("airflow", Language("Airflow", "airflow")),
    ("fastapi", Language("FastAPI", "fastapi")),
    ("flask", Language("Flask", "flask")),
    ("linux", Language("Linux", "linux")),
    ("terraform", Language("Terraform", "terraform")),
    ("numpy", Language("NumPy", "numpy")),
    ("pandas", Language("Pandas", "pandas")),
    ("scikit", Language("Scikit-learn", "scikit-learn")),
    ("powerbi", Language("Power BI", "powerbi")),
    ("mongodb", Language("MongoDB", "mongodb")),
    ("kafka", Language("Kafka", "kafka")),
    ("spark", Language("Apache Spark", "spark")),
)


def build_registry(entries, default_key: str = DEFAULT_LANGUAGE_KEY) -> Mapping[str, Language]:
    """Builds a read-only registry from (key, Language) pairs.

    Raises ValueError on a repeated key or when the fallback entry is missing.
    """
    registry = {}
    for key, language in entries:
        if key in registry:
            raise ValueError(f"Duplicate language key: {key!r}")
        registry[key] = language

    if default_key not in registry:
        raise ValueError(f"Fallback language {default_key!r} is not registered")

    return MappingProxyType(registry)


LANGUAGES = build_registry(_LANGUAGE_DATA)


def get_language(key: str) -> Language:
    """Fetches badge metadata, falling back to the HTML entry for unknown keys"""
    return LANGUAGES.get(key, LANGUAGES[DEFAULT_LANGUAGE_KEY])
