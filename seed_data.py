"""
Sample Firestore data used by the job seeding tool.

Jobs follow the migrated document shape (skillsRequired, experienceRequired,
track) so they can be scored as soon as they are written.
"""


def _job(title, company, location, skills, experience, track, description, apply_links):
    return {
        "title": title,
        "company": company,
        "location": location,
        "skillsRequired": skills,
        "experienceRequired": experience,
        "track": track,
        "description": description,
        "applyLinks": apply_links,
    }


SAMPLE_JOBS = [
    _job(
        "Senior Frontend Developer", "Tech Innovators Ltd", "Dhaka, Bangladesh",
        ["react", "javascript", "typescript", "tailwind", "css"], "advanced", "frontend",
        "We are looking for an experienced Frontend Developer to join our dynamic team. "
        "You will be responsible for building modern, responsive web applications using React and TypeScript.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/frontend-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/frontend-developer",
            "glassdoor": "https://www.glassdoor.com/job/frontend-developer",
        },
    ),
    _job(
        "Full Stack Engineer", "Digital Solutions BD", "Dhaka, Bangladesh",
        ["react", "node.js", "mongodb", "express", "javascript"], "intermediate", "fullstack",
        "Join our team as a Full Stack Engineer working on cutting-edge MERN stack applications.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/fullstack-engineer",
            "bdjobs": "https://www.bdjobs.com/jobs/fullstack-engineer",
        },
    ),
    _job(
        "Backend Developer - Node.js", "Cloud Systems Inc", "Chittagong, Bangladesh",
        ["node.js", "express", "mongodb", "redis", "docker"], "intermediate", "backend",
        "Design and implement scalable microservices architecture.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/backend-developer",
            "glassdoor": "https://www.glassdoor.com/job/backend-developer",
        },
    ),
    _job(
        "Junior React Developer", "StartupHub Bangladesh", "Dhaka, Bangladesh",
        ["react", "javascript", "html", "css", "git"], "beginner", "frontend",
        "Perfect opportunity for fresh graduates or junior developers.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/junior-react-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/junior-react-developer",
        },
    ),
    _job(
        "DevOps Engineer", "Infrastructure Solutions Ltd", "Dhaka, Bangladesh",
        ["docker", "kubernetes", "aws", "jenkins", "linux"], "advanced", "devops",
        "Lead DevOps initiatives and manage cloud infrastructure.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/devops-engineer",
            "glassdoor": "https://www.glassdoor.com/job/devops-engineer",
        },
    ),
    _job(
        "Mobile App Developer - React Native", "AppVentures BD", "Dhaka, Bangladesh",
        ["react native", "javascript", "typescript", "ios", "android"], "intermediate", "mobile",
        "Build cross-platform mobile applications.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/mobile-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/mobile-developer",
        },
    ),
    _job(
        "Python Django Developer", "Web Solutions Bangladesh", "Sylhet, Bangladesh",
        ["python", "django", "postgresql", "rest api", "docker"], "intermediate", "backend",
        "Develop robust web applications using Django framework.",
        {
            "bdjobs": "https://www.bdjobs.com/jobs/python-developer",
            "glassdoor": "https://www.glassdoor.com/job/python-developer",
        },
    ),
    _job(
        "Data Scientist", "Analytics Pro BD", "Dhaka, Bangladesh",
        ["python", "machine learning", "pandas", "tensorflow", "sql"], "advanced", "data science",
        "Apply machine learning algorithms to solve business problems.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/data-scientist",
            "glassdoor": "https://www.glassdoor.com/job/data-scientist",
        },
    ),
    _job(
        "UI/UX Designer & Frontend Developer", "Creative Digital Agency", "Dhaka, Bangladesh",
        ["figma", "html", "css", "javascript", "react"], "intermediate", "frontend",
        "Combine design skills with frontend development.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/ui-ux-frontend",
            "bdjobs": "https://www.bdjobs.com/jobs/ui-ux-developer",
        },
    ),
    _job(
        "QA Automation Engineer", "Quality First Software", "Dhaka, Bangladesh",
        ["selenium", "javascript", "cypress", "jest", "testing"], "intermediate", "qa",
        "Design and implement automated test suites.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/qa-automation",
            "bdjobs": "https://www.bdjobs.com/jobs/qa-engineer",
        },
    ),
    _job(
        "WordPress Developer", "CMS Solutions BD", "Rajshahi, Bangladesh",
        ["wordpress", "php", "mysql", "html", "css"], "beginner", "fullstack",
        "Develop and customize WordPress themes and plugins.",
        {"bdjobs": "https://www.bdjobs.com/jobs/wordpress-developer"},
    ),
    _job(
        "Flutter Developer", "Mobile First Apps", "Dhaka, Bangladesh",
        ["flutter", "dart", "firebase", "rest api", "mobile"], "intermediate", "mobile",
        "Build beautiful cross-platform mobile applications.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/flutter-developer",
            "glassdoor": "https://www.glassdoor.com/job/flutter-developer",
        },
    ),
    _job(
        "Java Spring Boot Developer", "Enterprise Solutions Ltd", "Dhaka, Bangladesh",
        ["java", "spring boot", "hibernate", "mysql", "microservices"], "advanced", "backend",
        "Develop enterprise-grade applications using Java.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/java-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/java-developer",
        },
    ),
    _job(
        "Vue.js Frontend Developer", "Modern Web Studios", "Dhaka, Bangladesh",
        ["vue.js", "javascript", "vuex", "nuxt", "tailwind"], "intermediate", "frontend",
        "Build progressive web applications using Vue.js.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/vue-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/vue-developer",
        },
    ),
    _job(
        "AWS Cloud Architect", "CloudTech Solutions", "Dhaka, Bangladesh",
        ["aws", "terraform", "kubernetes", "docker", "python"], "advanced", "devops",
        "Design and implement cloud infrastructure on AWS.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/cloud-architect",
            "glassdoor": "https://www.glassdoor.com/job/cloud-architect",
        },
    ),
    _job(
        "Graphic Designer & Web Developer", "Design & Code Studio", "Khulna, Bangladesh",
        ["photoshop", "illustrator", "html", "css", "javascript"], "beginner", "frontend",
        "Create stunning graphics and bring them to life on the web.",
        {"bdjobs": "https://www.bdjobs.com/jobs/graphic-web-developer"},
    ),
    _job(
        "Machine Learning Engineer", "AI Innovations BD", "Dhaka, Bangladesh",
        ["python", "tensorflow", "pytorch", "machine learning", "deep learning"], "advanced", "data science",
        "Develop and deploy machine learning models.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/ml-engineer",
            "glassdoor": "https://www.glassdoor.com/job/ml-engineer",
        },
    ),
    _job(
        "Angular Developer", "Enterprise Web Solutions", "Dhaka, Bangladesh",
        ["angular", "typescript", "rxjs", "html", "scss"], "intermediate", "frontend",
        "Build enterprise-level single page applications.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/angular-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/angular-developer",
        },
    ),
    _job(
        "MERN Stack Developer", "Full Stack Academy", "Dhaka, Bangladesh",
        ["mongodb", "express", "react", "node.js", "javascript"], "intermediate", "fullstack",
        "Work on complete MERN stack applications.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/mern-developer",
            "bdjobs": "https://www.bdjobs.com/jobs/mern-developer",
            "glassdoor": "https://www.glassdoor.com/job/mern-developer",
        },
    ),
    _job(
        "Cybersecurity Specialist", "SecureNet Bangladesh", "Dhaka, Bangladesh",
        ["security", "penetration testing", "linux", "networking", "python"], "advanced", "devops",
        "Protect infrastructure and conduct security audits.",
        {
            "linkedin": "https://www.linkedin.com/jobs/view/cybersecurity",
            "glassdoor": "https://www.glassdoor.com/job/cybersecurity",
        },
    ),
]

# Fields the matching engine reads from users/{uid}
EXAMPLE_USER_PROFILE = {
    "skills": ["react", "javascript", "typescript", "node.js", "mongodb"],
    "experienceLevel": "intermediate",
    "preferredTrack": "fullstack",
    "email": "user@example.com",
    "displayName": "John Doe",
    "bio": "Passionate developer",
    "education": "BSc in Computer Science",
    "location": "Dhaka, Bangladesh",
}
