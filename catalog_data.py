"""
Default catalogs shipped with the service.

These tables can be replaced without touching the matching logic by pointing
CAREER_CATALOG_PATH at a JSON file with the same section names.
"""

# Market-valued skills; order is the tie-break for equal importance
DEMAND_SKILLS = [
    {"name": "React", "category": "Frameworks & Libraries", "recommended_level": 4, "importance": 5},
    {"name": "TypeScript", "category": "Programming Languages", "recommended_level": 4, "importance": 5},
    {"name": "Node.js", "category": "Frameworks & Libraries", "recommended_level": 4, "importance": 4},
    {"name": "AWS", "category": "Cloud Platforms", "recommended_level": 3, "importance": 4},
    {"name": "Docker", "category": "DevOps", "recommended_level": 3, "importance": 3},
    {"name": "GraphQL", "category": "API", "recommended_level": 3, "importance": 3},
    {"name": "Next.js", "category": "Frameworks & Libraries", "recommended_level": 4, "importance": 4},
    {"name": "SQL", "category": "Databases", "recommended_level": 3, "importance": 4},
    {"name": "MongoDB", "category": "Databases", "recommended_level": 3, "importance": 3},
    {"name": "Data Structures", "category": "Computer Science", "recommended_level": 4, "importance": 5},
    {"name": "Algorithms", "category": "Computer Science", "recommended_level": 4, "importance": 5},
]

JOB_ROLES = [
    {
        "title": "Frontend Developer",
        "required_skills": ["JavaScript", "React", "HTML", "CSS", "TypeScript"],
        "description": "Build user interfaces and implement frontend functionality for web applications.",
        "average_salary": "$90,000 - $120,000",
        "growth_outlook": "Strong",
    },
    {
        "title": "Full Stack Developer",
        "required_skills": ["JavaScript", "React", "Node.js", "SQL", "MongoDB", "Express"],
        "description": "Develop both client and server-side applications, working with databases and APIs.",
        "average_salary": "$100,000 - $140,000",
        "growth_outlook": "Very Strong",
    },
    {
        "title": "Backend Developer",
        "required_skills": ["Node.js", "Express", "SQL", "MongoDB", "API Design"],
        "description": "Build server-side logic, databases, and APIs that power web applications.",
        "average_salary": "$95,000 - $130,000",
        "growth_outlook": "Strong",
    },
    {
        "title": "DevOps Engineer",
        "required_skills": ["Docker", "Kubernetes", "AWS", "CI/CD", "Linux"],
        "description": "Implement and manage infrastructure, deployment pipelines, and operational processes.",
        "average_salary": "$110,000 - $150,000",
        "growth_outlook": "Very Strong",
    },
    {
        "title": "React Native Developer",
        "required_skills": ["React", "JavaScript", "TypeScript", "Mobile Development"],
        "description": "Build cross-platform mobile applications using React Native framework.",
        "average_salary": "$95,000 - $135,000",
        "growth_outlook": "Strong",
    },
]

COURSES = [
    {
        "title": "Modern React with Redux",
        "provider": "Udemy",
        "skills_covered": ["React", "Redux", "JavaScript"],
        "difficulty": "Intermediate",
        "duration": "40 hours",
        "url": "https://www.udemy.com/course/react-redux/",
    },
    {
        "title": "Understanding TypeScript",
        "provider": "Udemy",
        "skills_covered": ["TypeScript", "JavaScript"],
        "difficulty": "Intermediate",
        "duration": "15 hours",
        "url": "https://www.udemy.com/course/understanding-typescript/",
    },
    {
        "title": "The Complete Node.js Developer Course",
        "provider": "Udemy",
        "skills_covered": ["Node.js", "Express", "MongoDB", "JavaScript"],
        "difficulty": "Intermediate",
        "duration": "35 hours",
        "url": "https://www.udemy.com/course/the-complete-nodejs-developer-course-2/",
    },
    {
        "title": "AWS Certified Solutions Architect",
        "provider": "A Cloud Guru",
        "skills_covered": ["AWS", "Cloud Architecture"],
        "difficulty": "Advanced",
        "duration": "40 hours",
        "url": "https://acloudguru.com/course/aws-certified-solutions-architect-associate-saa-c02",
    },
    {
        "title": "Docker & Kubernetes: The Practical Guide",
        "provider": "Udemy",
        "skills_covered": ["Docker", "Kubernetes", "DevOps"],
        "difficulty": "Intermediate",
        "duration": "22 hours",
        "url": "https://www.udemy.com/course/docker-kubernetes-the-practical-guide/",
    },
    {
        "title": "GraphQL with React: The Complete Developers Guide",
        "provider": "Udemy",
        "skills_covered": ["GraphQL", "React", "Node.js"],
        "difficulty": "Intermediate",
        "duration": "15 hours",
        "url": "https://www.udemy.com/course/graphql-with-react-course/",
    },
    {
        "title": "The Complete Next.js Developer Course",
        "provider": "Udemy",
        "skills_covered": ["Next.js", "React", "Node.js"],
        "difficulty": "Intermediate",
        "duration": "20 hours",
        "url": "https://www.udemy.com/course/nextjs-dev/",
    },
    {
        "title": "SQL Bootcamp",
        "provider": "Udemy",
        "skills_covered": ["SQL", "PostgreSQL", "Database Design"],
        "difficulty": "Beginner to Intermediate",
        "duration": "18 hours",
        "url": "https://www.udemy.com/course/the-complete-sql-bootcamp/",
    },
    {
        "title": "MongoDB - The Complete Developer's Guide",
        "provider": "Udemy",
        "skills_covered": ["MongoDB", "NoSQL", "Database Design"],
        "difficulty": "Intermediate",
        "duration": "16 hours",
        "url": "https://www.udemy.com/course/mongodb-the-complete-developers-guide/",
    },
    {
        "title": "JavaScript Algorithms and Data Structures Masterclass",
        "provider": "Udemy",
        "skills_covered": ["Data Structures", "Algorithms", "JavaScript"],
        "difficulty": "Intermediate to Advanced",
        "duration": "22 hours",
        "url": "https://www.udemy.com/course/js-algorithms-and-data-structures-masterclass/",
    },
]

# Lowercased skill name -> category, used when a role requires a skill with no demand entry
SKILL_CATEGORIES = {
    "javascript": "Programming Languages",
    "typescript": "Programming Languages",
    "python": "Programming Languages",
    "java": "Programming Languages",
    "c#": "Programming Languages",
    "react": "Frameworks & Libraries",
    "angular": "Frameworks & Libraries",
    "vue": "Frameworks & Libraries",
    "node.js": "Frameworks & Libraries",
    "express": "Frameworks & Libraries",
    "next.js": "Frameworks & Libraries",
    "sql": "Databases",
    "mongodb": "Databases",
    "postgresql": "Databases",
    "mysql": "Databases",
    "aws": "Cloud Platforms",
    "azure": "Cloud Platforms",
    "gcp": "Cloud Platforms",
    "docker": "DevOps",
    "kubernetes": "DevOps",
    "ci/cd": "DevOps",
    "git": "Tools",
    "html": "Frontend",
    "css": "Frontend",
    "graphql": "API",
    "rest": "API",
}

DEFAULT_CATEGORY = "Other"
