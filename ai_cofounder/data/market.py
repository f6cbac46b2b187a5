"""
Market research and pitch deck reference tables, keyed by plan industry.
"""

from typing import Any, Dict, List

MARKET_SIZES: Dict[str, str] = {
    "food": "$2.3B campus food market",
    "healthcare": "$4.2T global healthcare market",
    "education": "$6.3T global education market",
    "finance": "$12.6T global fintech market",
    "technology": "$5.2T global technology market",
    "transportation": "$8.1T global transportation market",
}

# Compound annual growth rate, percent
CAGR: Dict[str, float] = {
    "food": 12,
    "healthcare": 8,
    "education": 15,
    "finance": 20,
    "technology": 18,
    "transportation": 10,
}

COMPETITORS: Dict[str, List[Dict[str, Any]]] = {
    "food": [
        {"name": "Grubhub", "analysis": "Market leader in food delivery with strong restaurant network",
         "strengths": ["Large restaurant network", "Brand recognition", "Established logistics"],
         "weaknesses": ["High commission fees", "Limited healthy options", "Poor customer service"]},
        {"name": "Uber Eats", "analysis": "Tech-driven food delivery platform with global reach",
         "strengths": ["Advanced technology", "Global presence", "Driver network"],
         "weaknesses": ["High fees", "Competition with drivers", "Limited restaurant partnerships"]},
        {"name": "DoorDash", "analysis": "Fast-growing delivery platform with focus on local restaurants",
         "strengths": ["Local restaurant focus", "Fast delivery", "Good customer experience"],
         "weaknesses": ["High costs", "Limited market share", "Dependent on gig economy"]},
    ],
    "healthcare": [
        {"name": "Teladoc", "analysis": "Leading telemedicine platform with comprehensive healthcare services",
         "strengths": ["Comprehensive services", "Insurance partnerships", "Quality providers"],
         "weaknesses": ["High costs", "Limited availability", "Technology barriers"]},
        {"name": "Amwell", "analysis": "Telehealth platform focusing on urgent care and primary care",
         "strengths": ["Urgent care focus", "Insurance coverage", "Quality providers"],
         "weaknesses": ["Limited specialty care", "High costs", "Technology requirements"]},
    ],
    "education": [
        {"name": "Coursera", "analysis": "Online learning platform with university partnerships",
         "strengths": ["University partnerships", "Quality content", "Certifications"],
         "weaknesses": ["High costs", "Limited interaction", "Self-paced only"]},
        {"name": "Udemy", "analysis": "Marketplace for online courses with diverse content",
         "strengths": ["Diverse content", "Affordable pricing", "Large selection"],
         "weaknesses": ["Quality varies", "No credentials", "Limited support"]},
    ],
    "finance": [
        {"name": "PayPal", "analysis": "Digital payment platform with global reach",
         "strengths": ["Global reach", "Security", "Ease of use"],
         "weaknesses": ["High fees", "Limited features", "Competition"]},
        {"name": "Stripe", "analysis": "Payment processing platform for online businesses",
         "strengths": ["Developer-friendly", "Global reach", "Advanced features"],
         "weaknesses": ["Complex setup", "High fees", "Limited support"]},
    ],
    "technology": [
        {"name": "Microsoft", "analysis": "Technology giant with comprehensive software solutions",
         "strengths": ["Comprehensive solutions", "Enterprise focus", "Strong ecosystem"],
         "weaknesses": ["High costs", "Complex licensing", "Limited innovation"]},
        {"name": "Google", "analysis": "Tech leader with cloud and productivity solutions",
         "strengths": ["Innovation", "Cloud infrastructure", "AI capabilities"],
         "weaknesses": ["Privacy concerns", "Complex pricing", "Limited support"]},
    ],
    "transportation": [
        {"name": "Uber", "analysis": "Ride-sharing platform with global presence",
         "strengths": ["Global network", "Technology platform", "Diverse services"],
         "weaknesses": ["Regulatory issues", "Driver relations", "High costs"]},
        {"name": "Lyft", "analysis": "Ride-sharing platform focusing on North American market",
         "strengths": ["Driver-friendly", "Safety focus", "Local partnerships"],
         "weaknesses": ["Limited global reach", "High costs", "Competition"]},
    ],
}

TRENDS: Dict[str, List[Dict[str, str]]] = {
    "food": [
        {"name": "Healthy Eating Focus", "impact": "High",
         "description": "Growing demand for nutritious, organic, and locally-sourced food options"},
        {"name": "Mobile Ordering", "impact": "High",
         "description": "Rapid adoption of mobile apps for food ordering and delivery"},
        {"name": "Sustainability", "impact": "Medium",
         "description": "Increasing focus on eco-friendly packaging and sustainable practices"},
    ],
    "healthcare": [
        {"name": "Telemedicine Growth", "impact": "High",
         "description": "Accelerated adoption of remote healthcare services post-pandemic"},
        {"name": "AI in Healthcare", "impact": "High",
         "description": "Integration of artificial intelligence in diagnosis and treatment"},
        {"name": "Preventive Care", "impact": "Medium",
         "description": "Shift towards preventive healthcare and wellness programs"},
    ],
    "education": [
        {"name": "Online Learning", "impact": "High",
         "description": "Permanent shift towards digital and hybrid learning models"},
        {"name": "Microlearning", "impact": "Medium",
         "description": "Growing preference for bite-sized, focused learning content"},
        {"name": "Skills-Based Education", "impact": "High",
         "description": "Focus on practical skills and job-ready competencies"},
    ],
    "finance": [
        {"name": "Digital Payments", "impact": "High",
         "description": "Rapid adoption of digital and contactless payment methods"},
        {"name": "Cryptocurrency", "impact": "Medium",
         "description": "Growing acceptance and integration of digital currencies"},
        {"name": "Financial Inclusion", "impact": "High",
         "description": "Efforts to provide financial services to underserved populations"},
    ],
    "technology": [
        {"name": "AI Integration", "impact": "High",
         "description": "Widespread adoption of artificial intelligence across industries"},
        {"name": "Cloud Computing", "impact": "High",
         "description": "Continued migration to cloud-based solutions and services"},
        {"name": "Cybersecurity", "impact": "High",
         "description": "Increased focus on data protection and security measures"},
    ],
    "transportation": [
        {"name": "Electric Vehicles", "impact": "High",
         "description": "Rapid adoption of electric and hybrid vehicles"},
        {"name": "Autonomous Vehicles", "impact": "Medium",
         "description": "Development and testing of self-driving technology"},
        {"name": "Shared Mobility", "impact": "High",
         "description": "Growth in car-sharing, bike-sharing, and ride-sharing services"},
    ],
}

CUSTOMER_SEGMENTS: Dict[str, List[Dict[str, Any]]] = {
    "food": [
        {"segment": "College Students", "size": "20M+", "willingness": "Medium",
         "painPoints": ["Budget constraints", "Time limitations", "Limited healthy options"]},
        {"segment": "Young Professionals", "size": "15M+", "willingness": "High",
         "painPoints": ["Busy schedules", "Health consciousness", "Convenience needs"]},
        {"segment": "Health-Conscious Consumers", "size": "25M+", "willingness": "High",
         "painPoints": ["Finding healthy options", "Nutritional information", "Quality assurance"]},
    ],
    "healthcare": [
        {"segment": "Remote Workers", "size": "40M+", "willingness": "High",
         "painPoints": ["Limited time for appointments", "Need for convenience", "Cost concerns"]},
        {"segment": "Elderly Population", "size": "50M+", "willingness": "Medium",
         "painPoints": ["Technology barriers", "Accessibility issues", "Cost sensitivity"]},
        {"segment": "Chronic Disease Patients", "size": "30M+", "willingness": "High",
         "painPoints": ["Regular monitoring needs", "Cost of care", "Access to specialists"]},
    ],
    "education": [
        {"segment": "Working Professionals", "size": "60M+", "willingness": "High",
         "painPoints": ["Time constraints", "Career advancement", "Skill gaps"]},
        {"segment": "Students", "size": "20M+", "willingness": "Medium",
         "painPoints": ["Cost of education", "Relevance of content", "Flexibility needs"]},
        {"segment": "Career Changers", "size": "15M+", "willingness": "High",
         "painPoints": ["Skill transition", "Industry knowledge", "Networking opportunities"]},
    ],
    "finance": [
        {"segment": "Small Businesses", "size": "30M+", "willingness": "High",
         "painPoints": ["High transaction fees", "Complex processes", "Limited features"]},
        {"segment": "Freelancers", "size": "20M+", "willingness": "High",
         "painPoints": ["Irregular income", "Tax complexity", "Payment delays"]},
        {"segment": "Underbanked Individuals", "size": "25M+", "willingness": "Medium",
         "painPoints": ["Limited access", "High fees", "Complex requirements"]},
    ],
    "technology": [
        {"segment": "Small Businesses", "size": "30M+", "willingness": "High",
         "painPoints": ["Limited IT resources", "High costs", "Complexity"]},
        {"segment": "Startups", "size": "5M+", "willingness": "High",
         "painPoints": ["Budget constraints", "Scalability needs", "Time to market"]},
        {"segment": "Enterprises", "size": "10M+", "willingness": "Medium",
         "painPoints": ["Integration challenges", "Security concerns", "Compliance requirements"]},
    ],
    "transportation": [
        {"segment": "Urban Commuters", "size": "50M+", "willingness": "High",
         "painPoints": ["Traffic congestion", "High costs", "Limited options"]},
        {"segment": "Business Travelers", "size": "20M+", "willingness": "High",
         "painPoints": ["Reliability needs", "Time efficiency", "Cost management"]},
        {"segment": "Eco-Conscious Users", "size": "15M+", "willingness": "High",
         "painPoints": ["Environmental impact", "Sustainability", "Carbon footprint"]},
    ],
}

OPPORTUNITY_SCORES: Dict[str, Dict[str, float]] = {
    "food": {"overall": 8.5, "marketSize": 9, "competition": 7, "growth": 9},
    "healthcare": {"overall": 8.8, "marketSize": 9, "competition": 6, "growth": 8},
    "education": {"overall": 8.2, "marketSize": 8, "competition": 8, "growth": 9},
    "finance": {"overall": 9.1, "marketSize": 9, "competition": 7, "growth": 9},
    "technology": {"overall": 8.7, "marketSize": 9, "competition": 8, "growth": 9},
    "transportation": {"overall": 8.3, "marketSize": 8, "competition": 7, "growth": 8},
}

INSIGHTS: Dict[str, List[str]] = {
    "food": [
        "Large, growing market with high demand",
        "Underserved student segment with specific needs",
        "Moderate competition with room for innovation",
        "Strong growth trends in healthy eating",
    ],
    "healthcare": [
        "Massive market with high growth potential",
        "Technology adoption accelerating post-pandemic",
        "Moderate competition in specialized areas",
        "Strong regulatory support for innovation",
    ],
    "education": [
        "Large market with diverse needs",
        "Technology disruption creating opportunities",
        "High competition but room for specialization",
        "Strong growth in online learning adoption",
    ],
    "finance": [
        "Huge market with high growth potential",
        "Technology disruption creating new opportunities",
        "Moderate competition in specialized areas",
        "Strong regulatory support for innovation",
    ],
    "technology": [
        "Large, fast-growing market",
        "High demand for innovative solutions",
        "Competitive but with room for specialization",
        "Strong growth trends in digital transformation",
    ],
    "transportation": [
        "Large market with evolving needs",
        "Technology disruption creating opportunities",
        "Moderate competition with room for innovation",
        "Strong growth in shared mobility",
    ],
}


# ============================================================================
# Pitch deck
# ============================================================================

COMPANY_SUFFIXES = ["Tech", "Solutions", "Labs", "Innovations", "Systems", "Platform"]

TAGLINES: Dict[str, List[str]] = {
    "technology": ["Innovating the Future", "Technology That Matters", "Building Tomorrow Today"],
    "healthcare": ["Transforming Healthcare", "Better Health for Everyone", "Healthcare Innovation"],
    "education": ["Empowering Learning", "Education for All", "Learning Reimagined"],
    "finance": ["Financial Innovation", "Banking the Future", "Smart Finance Solutions"],
    "food": ["Fresh Ideas, Better Food", "Food Innovation", "Nourishing Communities"],
    "transportation": ["Moving Forward", "Smart Transportation", "Connected Mobility"],
}

PROBLEM_HEADLINES: Dict[str, str] = {
    "technology": "The Problem with Current Technology Solutions",
    "healthcare": "Healthcare Access and Quality Challenges",
    "education": "Education Gaps and Learning Barriers",
    "finance": "Financial Services Need Modernization",
    "food": "Food Industry Inefficiencies",
    "transportation": "Transportation and Mobility Issues",
}

PROBLEM_STATS: Dict[str, List[str]] = {
    "technology": ["$2.3T market with 15% annual growth",
                   "73% of businesses struggle with digital transformation",
                   "89% of users report poor user experience"],
    "healthcare": ["$4.1T healthcare market globally",
                   "60% of patients face access barriers",
                   "45% of healthcare costs are administrative"],
    "education": ["$6T global education market",
                  "1.6B students affected by learning gaps",
                  "67% of teachers need better tools"],
    "finance": ["$12.6T global financial services market",
                "1.7B adults are unbanked",
                "78% of consumers want better digital banking"],
    "food": ["$8.7T global food industry",
             "30% of food is wasted annually",
             "2B people face food insecurity"],
    "transportation": ["$8.4T global transportation market",
                       "1.3M traffic deaths annually",
                       "40% of urban space is used for parking"],
}

SOLUTION_FEATURES: Dict[str, List[str]] = {
    "technology": ["AI-powered automation", "Real-time analytics", "Seamless integration", "Scalable architecture"],
    "healthcare": ["Telemedicine platform", "AI diagnostics", "Patient management", "Secure data handling"],
    "education": ["Personalized learning", "Interactive content", "Progress tracking", "Collaborative tools"],
    "finance": ["Digital banking", "AI fraud detection", "Mobile payments", "Investment tools"],
    "food": ["Supply chain optimization", "Quality tracking", "Waste reduction", "Consumer insights"],
    "transportation": ["Smart routing", "Real-time tracking", "Eco-friendly options", "Integrated payments"],
}
