"""
Entity dictionaries for term recognition.

Static, categorized term tables. Each dictionary maps a category name to a
tuple of terms (English and Russian spellings side by side). The tables are
read-only; callers that need different terms pass their own mapping to the
classifier or keyword extractor instead of editing these.

These aren't meant to be exhaustive. Terms were added from real staffing
requests as they came in.
"""

from types import MappingProxyType

# =============================================================================
# CLASSIFIER DEFAULTS
# =============================================================================

# Default candidate terms for EntityClassifier.extract_technologies()
CLASSIFIER_TECHNOLOGIES = MappingProxyType(
    {
        "languages": (
            "Java",
            "JavaScript",
            "TypeScript",
            "Python",
            "C#",
            "Kotlin",
            "Swift",
            "SQL",
            "HTML",
            "CSS",
            "PHP",
            "Ruby",
            "Go",
            "Rust",
        ),
        "frameworks": (
            "React",
            "Angular",
            "Vue.js",
            "Node.js",
            "Spring",
            "Express",
            "Django",
            "Flask",
            "Selenium",
            "Cypress",
            "Playwright",
            "TestNG",
            "JUnit",
            "Cucumber",
            "Robot Framework",
            "Appium",
        ),
        "databases": (
            "MySQL",
            "PostgreSQL",
            "MongoDB",
            "Redis",
            "Oracle",
            "MS SQL",
            "SQLite",
            "DynamoDB",
            "Elasticsearch",
            "Cassandra",
        ),
        "tools": (
            "Postman",
            "Swagger",
            "Jira",
            "Confluence",
            "Git",
            "Jenkins",
            "Docker",
            "Kubernetes",
            "AWS",
            "Azure",
            "GCP",
            "SoapUI",
        ),
        "platforms": (
            "Android",
            "iOS",
            "Web",
            "Mobile",
            "Desktop",
            "API",
            "REST",
            "GraphQL",
            "SOAP",
            "Microservices",
        ),
    }
)

# =============================================================================
# ENTITY DICTIONARIES
# =============================================================================

TECHNOLOGIES = MappingProxyType(
    {
        "languages": (
            "Java", "C#", "C++", "Python", "JavaScript", "TypeScript", "Go", "Kotlin",
            "Swift", "Groovy", "Delphi", "PL/SQL",
        ),
        "frameworks": (
            "Spring", "Spring Boot", "Micronaut", "GraalVM", "Node.js", "React", "Angular",
            "Vue.js", "JUnit", "TestNG", "PyTest", "Robot Framework", "Selenide", "Cucumber",
            "Selenium", "Appium", "Cypress", "CodeceptJS", "Jest", "Mocha", "Chai",
            "Allure Reports", "RestAssured", "Wiremock", "TestComplete", "Testomat",
        ),
        "databases": (
            "PostgreSQL", "MySQL", "MS SQL", "MongoDB", "Redis", "NoSQL", "DB2",
            "Relational Databases", "InfluxDB",
        ),
        "cloud_and_devops": (
            "AWS", "AWS RDS", "AWS EKS", "Azure DevOps", "Google Cloud Platform", "GCP",
            "Jenkins", "GitHub Actions", "GitLab CI/CD", "GitLab", "Bamboo", "Bitbucket",
            "GitlabCI", "Openshift", "Helm", "Terraform", "CloudFormation", "Docker",
            "Kubernetes", "VMware Horizon", "OpenStack", "Hazelcast", "Prometheus", "Grafana",
            "Octopus",
        ),
        "messaging_and_integration": (
            "Kafka", "RabbitMQ", "ActiveMQ", "ActiveMQ Artemis", "JMS", "Mulesoft",
            "Service Workers", "GRPC", "WebSocket", "OpenLens", "OpenSearch",
        ),
        "testing_tools": (
            "Postman", "Insomnia", "SoapUI", "JMeter", "ArtilleryIO", "Artillery", "Locust",
            "SuperTest", "Fiddler", "Charles Proxy", "Charles", "Swagger", "TestRail", "Zephyr",
            "Linear", "Apptimized",
        ),
        "bi_and_reporting": (
            "Power BI", "QuickSight", "SharePoint", "Databricks", "Confluence", "Amplitude",
            "Appsflyer", "AppMetrica", "Mosaic Orchestrator", "Powercloud", "Float", "Tempo",
        ),
        "dev_tools": (
            "Visual Studio Code", "IntelliJ IDEA", "Android Studio", "PLSQL Developer",
            "Direct Oracle Access", "Developer Express Suite", "xCode", "Miro", "Figma",
        ),
        "automation_and_office": (
            "Automation Anywhere", "UIPath", "SikuliX", "AutoHotkey",
            "Microsoft Power Automate", "MSI", "MSIX", "App-V", "Intune",
        ),
        "network_and_security": (
            "Wireshark", "Metasploit", "Burp Suite", "Nmap", "OAuth", "SAML",
            "Active Directory", "SyHunt", "SAP", "SAP GRC", "SAP IDM", "Citrix",
        ),
        "cms": ("Drupal", "Magento", "Umbraco"),
        "other": (
            "Chrome DevTools", "BeautifulSoup", "lxml", "Puppeteer", "YAML", "XML Tools",
            "Gherkin", "Studio", "OpenAI", "Adaptavist", "Trino", "Airflow",
        ),
    }
)

PLATFORMS = MappingProxyType(
    {
        "desktop_os": ("Windows", "Linux", "macOS", "Unix"),
        "mobile_os": ("iOS", "Android", "Mobile"),
        "gaming_consoles": ("Xbox", "PlayStation", "PS4", "PS5", "Nintendo Switch"),
        "web": ("Web",),
        "hardware": ("PC", "Mac", "Raspberry Pi"),
        "enterprise": ("Mainframe", "z/OS", "VDI"),
    }
)

SKILLS = MappingProxyType(
    {
        "testing_types": (
            "Functional Testing", "Non-functional testing", "Performance Testing",
            "Security Testing", "Penetration Testing", "Vulnerability Assessment",
            "Regression Testing", "Localization Testing", "Тестирование локализации",
            "Mainframe Testing", "Тестирование мейнфреймов", "UAT (User Acceptance Testing)",
            "Smoke testing", "UI Testing", "API Testing", "Backend Testing",
            "Тестирование Backend", "Frontend Testing", "Фронтенд-тестирование", "DB Testing",
            "Тестирование БД", "Unit Testing", "E2E Testing", "Exploratory Testing",
            "Continuous Testing", "Greybox Testing", "Black-box testing",
            "Тестирование методом «черного ящика»", "Desktop Application Testing",
            "Тестирование десктопных приложений", "Мобильное тестирование",
        ),
        "methodologies_and_processes": (
            "Agile", "Scrum", "Agile QA", "Sprint Testing", "BDD", "TDD", "OOP", "ООП",
            "Risk-based testing", "Тестирование на основе рисков", "Shift Left Testing",
            "QA Process", "QA Strategy", "QA Methodologies", "SDLC", "Development Lifecycle",
            "DoD (Definition of Done)", "ISTQB",
        ),
        "automation_and_infra": (
            "Test Automation", "CI/CD", "IaC", "Infrastructure as Code", "Automation Roadmap",
            "Automation Patterns", "Паттерны автоматизации",
        ),
        "architecture_and_design": (
            "Microservices", "DDD (Domain-Driven Design)", "CQRS", "Event Sourcing",
            "Test Architecture",
        ),
        "data_and_db": (
            "SQL", "DML", "Relational Databases", "Реляционные СУБД", "Data Contracts",
            "EDIFACT",
        ),
        "management_and_analysis": (
            "Test coordination", "Test Management", "Defect Tracking",
            "RCA (Root Cause Analysis)", "Test Design", "Техники тест-дизайна",
            "Test Specifications", "Acceptance Criteria", "Business Requirements",
            "Анализ спецификаций", "Тестовая документация",
        ),
        "technical_skills": (
            "REST API", "GraphQL", "HTTP", "API Integration", "Message Queues", "MQ",
            "Message Brokers", "XSS", "SQLi", "Scraping", "GUI Automation", "DOM Navigation",
            "XPath", "CSS Selectors", "Software Packaging", "Linting", "Mess Detection",
            "Bug fixing", "Отладка", "Debugging", "Mock Services", "Мок-сервисы",
            "Cross-platform compatibility", "Кросс-платформенная совместимость", "Code Review",
        ),
        "ai_and_ml": (
            "Machine Learning", "ML", "LLM", "LLM prompt engineering", "Bias detection",
            "Data Validation", "Predictive Modeling", "Sentiment Analysis",
        ),
        "other": (
            "IT Asset Management", "MDM (Mobile Device Management)", "IT Security", "Mentoring",
        ),
    }
)

DOMAINS = MappingProxyType(
    {
        "finance": (
            "Fintech", "Финтех", "Banking", "Банкинг", "Банк", "Trading", "Online Trading",
            "Торговые системы", "Finance", "Финансы", "Финансовые расчетные системы",
            "Investment Business", "Инвестиционный бизнес", "UK payment regulations",
        ),
        "business_models": ("B2B", "B2C", "PaaS", "SaaS", "Middleware"),
        "hr_tech": ("Skills Management", "Workforce Enablement", "HR Tech", "Future of Work"),
        "security": ("Cybersecurity", "Access Management"),
        "industries": (
            "E-commerce", "Geo Data", "Геоданные", "Pharmaceutical", "Automotive",
            "Energy industry", "Healthcare", "Gaming",
        ),
        "other": (
            "IT-Asset Management", "Mobile Device Management", "Messenger",
            "Business Analysis", "Customer Experience", "CX", "Автозаказ",
            "Management Simulation", "Astrology", "Астрология", "Generative AI",
        ),
    }
)

ROLES = MappingProxyType(
    {
        "development": ("Developer", "Fullstack Software Developer in Test"),
        "quality_assurance": (
            "QA Engineer", "Automation QA", "AQA", "Test Automation Engineer",
            "Automation Tester", "Manual QA", "Manual QA Engineer", "Fullstack QA",
            "Backend QA", "Mobile QA Tester", "Tester", "SDET",
        ),
        "qa_management": ("Test Lead", "Automation Infrastructure Technical Lead", "Hands-on Lead"),
        "analysis_and_specialized": (
            "Business Analyst", "Test Analyst", "Macro Specialist", "Scraper Specialist",
        ),
        "security_and_ops": ("Penetration Tester", "IT Security Specialist", "TestOps", "DevOps"),
    }
)

# Entity type name -> dictionary
ENTITY_DICTIONARIES = MappingProxyType(
    {
        "technology": TECHNOLOGIES,
        "platform": PLATFORMS,
        "skill": SKILLS,
        "domain": DOMAINS,
        "role": ROLES,
    }
)
