FRAUD_DETECTION_STANDARD_PROMPT = """
You are an insurance fraud analyst.
Analyze this insurance transaction/claim data for signs of fraud. Provide a risk score (1-10)
and a detailed explanation of any suspicious patterns.

{transaction_data}

Format your response as markdown with the following structure:
## RISK SCORE: [1-10]

## FRAUD INDICATORS:
- [List specific suspicious elements]

## EXPLANATION:
[Detailed analysis]

## RECOMMENDATIONS:
[What actions to take]
""".strip()


FRAUD_DETECTION_QUICK_PROMPT = """
Screen this insurance claim or transaction for fraud red flags. Be brief.

{transaction_data}

Respond in markdown:
## RISK SCORE: [1-10]

## TOP RED FLAGS:
- [At most three items]

## NEXT ACTION:
[One sentence]
""".strip()


FRAUD_DETECTION_FORENSIC_PROMPT = """
You are a senior special investigations unit (SIU) examiner.
Perform a forensic review of the insurance data below. Check timeline consistency, amounts
versus typical costs, provider and claimant behaviour, documentation gaps, and known fraud
schemes (staged losses, inflated bills, phantom treatment, duplicate billing).

{transaction_data}

Respond in markdown:
## RISK SCORE: [1-10]

## FRAUD INDICATORS:
- [Each indicator with the evidence that supports it]

## PATTERN ANALYSIS:
[How the indicators relate to known fraud schemes]

## MITIGATING FACTORS:
- [Facts that lower the risk]

## INVESTIGATION PLAN:
1. [Ordered investigative steps]

## RECOMMENDATIONS:
[Pay, pend, or refer, with justification]
""".strip()


CLAIM_ASSISTANT_STANDARD_PROMPT = """
Help me understand this insurance claim rejection and draft an appeal. Here's the rejection reason:

{rejection_reason}

Please provide:
## SIMPLE EXPLANATION
Explain the rejection reason in plain English.

## WHY THIS HAPPENED
Common reasons for this type of rejection.

## APPEAL STRATEGY
Steps to take for an appeal.

## DRAFT APPEAL LETTER
A professional appeal letter template.
""".strip()


CLAIM_ASSISTANT_QUICK_PROMPT = """
A policyholder's claim was rejected for this reason:

{rejection_reason}

In markdown, give:
## WHAT IT MEANS
Two or three plain sentences.

## WHAT TO DO NOW
- [Three short steps]

## SHORT APPEAL NOTE
A brief, polite appeal message the policyholder can send today.
""".strip()


CLAIM_ASSISTANT_LEGAL_PROMPT = """
You are a claims advocate experienced in insurance disputes and regulatory complaints.
Review this claim rejection:

{rejection_reason}

Respond in markdown:
## PLAIN-LANGUAGE SUMMARY
What the insurer is claiming.

## GROUNDS TO CONTEST
- [Each weakness in the insurer's position]

## EVIDENCE TO GATHER
- [Documents and records that support the appeal]

## ESCALATION PATH
Internal grievance, regulator complaint, ombudsman, and court, with typical deadlines.

## FORMAL APPEAL LETTER
A formal letter citing policy terms and policyholder-protection principles.
""".strip()


PRODUCT_RECOMMENDATION_STANDARD_PROMPT = """
Based on this user profile, recommend the best insurance policies:

Age: {age}
Annual Income: ${income}
Family Size: {family_size}
Coverage Goal: {coverageGoal}

Format your response using markdown and include the following sections:

## TOP RECOMMENDATIONS
List 3 specific insurance products/policies with names and types.

## REASONING
Explain why each is suitable based on the profile.

## COVERAGE AMOUNTS
Provide suggested coverage amounts for each.

## ESTIMATED COSTS
Estimate monthly or yearly premiums (approximate).

## PRIORITY ORDER
Which policy to get first, second, and third.

## ADDITIONAL CONSIDERATIONS
Mention any profile-specific tips, concerns, or requirements.
""".strip()


PRODUCT_RECOMMENDATION_BUDGET_PROMPT = """
Recommend affordable insurance for this profile. Favour essential cover and low premiums.

Age: {age}
Annual Income: ${income}
Family Size: {family_size}
Coverage Goal: {coverageGoal}

Respond in markdown:
## ESSENTIAL COVER
- [Up to 2 must-have policies with approximate premiums]

## WAYS TO SAVE
- [Practical tips to lower premiums]
""".strip()


PRODUCT_RECOMMENDATION_COMPREHENSIVE_PROMPT = """
You are a certified financial planner specialising in insurance.
Build a complete protection plan for this profile:

Age: {age}
Annual Income: ${income}
Family Size: {family_size}
Coverage Goal: {coverageGoal}

Respond in markdown:
## PROTECTION NEEDS ANALYSIS
Life, health, disability, property and liability exposures.

## RECOMMENDED PORTFOLIO
- [Each product with type, suggested sum insured and riders]

## ESTIMATED COSTS
Approximate yearly premium per product and total as a share of income.

## PRIORITY ORDER
What to buy first and why.

## REVIEW TRIGGERS
Life events that should prompt a review of this plan.
""".strip()


CLAUSE_SIMPLIFIER_STANDARD_PROMPT = """
Please simplify this insurance policy text into plain English that anyone can understand:

{policy_text}

Please format your response using markdown and follow this structure:

## SIMPLIFIED EXPLANATION
Break down the complex language into simple terms.

## KEY POINTS
- Highlight the most important takeaways.

## WHAT THIS MEANS FOR YOU
Explain how this affects the policyholder in practical terms.

## POTENTIAL CONCERNS
Mention anything the policyholder should be cautious about.

## QUESTIONS TO ASK
Suggest what questions the policyholder should ask the insurer.

Keep it friendly, conversational, and free of jargon.
""".strip()


CLAUSE_SIMPLIFIER_PLAIN_PROMPT = """
Rewrite this insurance clause so a 12-year-old could understand it:

{policy_text}

Respond in markdown:
## IN SIMPLE WORDS
A short paragraph.

## REMEMBER
- [Two or three key points]
""".strip()


CLAUSE_SIMPLIFIER_LEGAL_PROMPT = """
You are an insurance coverage lawyer explaining a clause to a client.

{policy_text}

Respond in markdown:
## CLAUSE-BY-CLAUSE BREAKDOWN
Each sentence of the clause and its plain meaning.

## DEFINED TERMS
- [Terms of art and how insurers usually interpret them]

## EXCLUSIONS AND CONDITIONS
What must happen, or must not happen, for cover to apply.

## HOW DISPUTES USUALLY GO
How ambiguous wording is typically read against the insurer.

## QUESTIONS TO ASK
Precise questions to put to the insurer in writing.
""".strip()


CHAT_SUPPORT_STANDARD_PROMPT = """
You are a friendly and knowledgeable insurance customer support assistant.
Answer the customer's question clearly and accurately. If the answer depends on the
specific policy, say so and explain what to check.

Customer question: {user_question}

Format your answer in markdown with short paragraphs, bullet points where helpful,
and a **bold** summary line at the end.
""".strip()


CHAT_SUPPORT_QUICK_PROMPT = """
Answer this insurance question in three sentences or fewer:

{user_question}
""".strip()


CHAT_SUPPORT_EXPERT_PROMPT = """
You are a senior insurance specialist answering a question from an experienced customer.
Use precise terminology and cover edge cases, exclusions and regulatory considerations.

Customer question: {user_question}

Respond in markdown:
## ANSWER

## DETAILS
- [Relevant conditions, exclusions and examples]

## NEXT STEPS
""".strip()


PROMPT_LIBRARY: dict[str, dict] = {
    "fraud_detection": {
        "agent_info": {
            "name": "Fraud Detection Assistant",
            "description": "Analyze insurance claims and transactions for potential fraud indicators",
            "icon": "shield",
            "color": "red",
        },
        "prompts": [
            {
                "id": "fraud_detection_v1",
                "name": "Standard Fraud Analysis",
                "description": "Balanced risk score with indicators, explanation and recommendations",
                "prompt": FRAUD_DETECTION_STANDARD_PROMPT,
                "temperature": 0.3,
                "max_tokens": 1500,
                "priority": 3,
            },
            {
                "id": "fraud_detection_v2",
                "name": "Quick Fraud Screen",
                "description": "Short red-flag screen for fast triage",
                "prompt": FRAUD_DETECTION_QUICK_PROMPT,
                "temperature": 0.2,
                "max_tokens": 600,
                "priority": 2,
            },
            {
                "id": "fraud_detection_v3",
                "name": "Forensic Investigation",
                "description": "In-depth forensic review with an investigation plan",
                "prompt": FRAUD_DETECTION_FORENSIC_PROMPT,
                "temperature": 0.2,
                "max_tokens": 2500,
                "priority": 2,
            },
        ],
        "selection_criteria": {
            "default_prompt": "fraud_detection_v1",
            "factors": ["response_time_requirement", "complexity_level"],
        },
    },
    "claim_assistant": {
        "agent_info": {
            "name": "Claim Assistant",
            "description": "Understand claim rejections and draft professional appeal letters",
            "icon": "file-text",
            "color": "blue",
        },
        "prompts": [
            {
                "id": "claim_assistant_v1",
                "name": "Standard Appeal Helper",
                "description": "Explanation, causes, appeal strategy and a draft letter",
                "prompt": CLAIM_ASSISTANT_STANDARD_PROMPT,
                "temperature": 0.5,
                "max_tokens": 1800,
                "priority": 3,
            },
            {
                "id": "claim_assistant_v2",
                "name": "Quick Appeal Note",
                "description": "Short explanation and a brief appeal message",
                "prompt": CLAIM_ASSISTANT_QUICK_PROMPT,
                "temperature": 0.4,
                "max_tokens": 800,
                "priority": 2,
            },
            {
                "id": "claim_assistant_v3",
                "name": "Legal Escalation Brief",
                "description": "Grounds to contest, evidence list, escalation path and a formal letter",
                "prompt": CLAIM_ASSISTANT_LEGAL_PROMPT,
                "temperature": 0.3,
                "max_tokens": 2500,
                "priority": 2,
            },
        ],
        "selection_criteria": {
            "default_prompt": "claim_assistant_v1",
            "factors": ["complexity_of_rejection", "legal_involvement", "time_sensitivity"],
        },
    },
    "product_recommendation": {
        "agent_info": {
            "name": "Product Recommendation",
            "description": "Get personalized insurance recommendations based on your profile",
            "icon": "search",
            "color": "green",
        },
        "prompts": [
            {
                "id": "product_recommendation_v1",
                "name": "Balanced Recommendations",
                "description": "Three products with reasoning, amounts, costs and priority",
                "prompt": PRODUCT_RECOMMENDATION_STANDARD_PROMPT,
                "temperature": 0.6,
                "max_tokens": 2000,
                "priority": 3,
            },
            {
                "id": "product_recommendation_v2",
                "name": "Budget Essentials",
                "description": "Essential low-premium cover and saving tips",
                "prompt": PRODUCT_RECOMMENDATION_BUDGET_PROMPT,
                "temperature": 0.5,
                "max_tokens": 900,
                "priority": 2,
            },
            {
                "id": "product_recommendation_v3",
                "name": "Comprehensive Protection Plan",
                "description": "Full needs analysis and product portfolio",
                "prompt": PRODUCT_RECOMMENDATION_COMPREHENSIVE_PROMPT,
                "temperature": 0.5,
                "max_tokens": 3000,
                "priority": 2,
            },
        ],
        "selection_criteria": {
            "default_prompt": "product_recommendation_v1",
            "factors": ["budget_constraints", "coverage_complexity", "income_level"],
        },
    },
    "clause_simplifier": {
        "agent_info": {
            "name": "Clause Simplifier",
            "description": "Turn complex policy language into plain English",
            "icon": "book-open",
            "color": "purple",
        },
        "prompts": [
            {
                "id": "clause_simplifier_v1",
                "name": "Plain English Breakdown",
                "description": "Simplified explanation, key points, impact, concerns and questions",
                "prompt": CLAUSE_SIMPLIFIER_STANDARD_PROMPT,
                "temperature": 0.4,
                "max_tokens": 1500,
                "priority": 3,
            },
            {
                "id": "clause_simplifier_v2",
                "name": "Very Simple Summary",
                "description": "A short summary anyone can read",
                "prompt": CLAUSE_SIMPLIFIER_PLAIN_PROMPT,
                "temperature": 0.4,
                "max_tokens": 600,
                "priority": 2,
            },
            {
                "id": "clause_simplifier_v3",
                "name": "Legal Interpretation",
                "description": "Clause-by-clause reading with defined terms and exclusions",
                "prompt": CLAUSE_SIMPLIFIER_LEGAL_PROMPT,
                "temperature": 0.2,
                "max_tokens": 2500,
                "priority": 2,
            },
        ],
        "selection_criteria": {
            "default_prompt": "clause_simplifier_v1",
            "factors": ["complexity_of_language", "legal_importance", "time_urgency"],
        },
    },
    "chat_support": {
        "agent_info": {
            "name": "Insurance Chat Support",
            "description": "Ask any insurance-related question and get a clear answer",
            "icon": "message-circle",
            "color": "blue",
        },
        "prompts": [
            {
                "id": "chat_support_v1",
                "name": "Friendly Support Answer",
                "description": "Clear answer with a bold summary line",
                "prompt": CHAT_SUPPORT_STANDARD_PROMPT,
                "temperature": 0.7,
                "max_tokens": 1000,
                "priority": 3,
            },
            {
                "id": "chat_support_v2",
                "name": "Quick Answer",
                "description": "Three sentences or fewer",
                "prompt": CHAT_SUPPORT_QUICK_PROMPT,
                "temperature": 0.5,
                "max_tokens": 300,
                "priority": 2,
            },
            {
                "id": "chat_support_v3",
                "name": "Expert Answer",
                "description": "Precise terminology with edge cases and exclusions",
                "prompt": CHAT_SUPPORT_EXPERT_PROMPT,
                "temperature": 0.4,
                "max_tokens": 1800,
                "priority": 1,
            },
        ],
        "selection_criteria": {
            "default_prompt": "chat_support_v1",
            "factors": ["question_complexity", "response_urgency", "customer_expertise_level"],
        },
    },
}
