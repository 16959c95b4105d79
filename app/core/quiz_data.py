"""Static quiz catalog, category summaries and feedback ladder.

The catalog is validated once at import time; a misconfigured catalog
fails the process at startup instead of on the first submission.
"""

from collections import Counter
from collections.abc import Sequence
from types import MappingProxyType

from app.core.quiz_errors import CatalogConfigurationError
from app.core.schemas_quiz import FeedbackThreshold, FeedbackTier, QuizCategory, QuizItem


def _item(
    item_id: str,
    category: QuizCategory,
    title: str,
    description: str,
    weighted_points: float,
    advice: str,
) -> QuizItem:
    return QuizItem(
        id=item_id,
        category=category,
        title=title,
        description=description,
        weighted_points=weighted_points,
        advice=advice,
    )


# =========================
# Catalog
# =========================

QUIZ_ITEMS: tuple[QuizItem, ...] = (
    # Customer-Centric Approach
    _item(
        "cca1",
        QuizCategory.CUSTOMER_CENTRIC,
        "Do you offer rewards that are tailored to each customer's preferences and purchase history?",
        "This means using past purchase data to create personalized rewards rather than generic offers for everyone.",
        4,
        "Use past purchase history to drive reward offerings. This makes the program feel intentional, not generic.",
    ),
    _item(
        "cca2",
        QuizCategory.CUSTOMER_CENTRIC,
        "Do you send personalized offers based on individual shopping habits and browsing behavior?",
        "Automated systems that track what customers buy or browse to send relevant, targeted offers.",
        4,
        "Set up automations that send offers based on what each customer buys or browses. Targeted relevance increases conversion.",
    ),
    _item(
        "cca3",
        QuizCategory.CUSTOMER_CENTRIC,
        "Do you reward customers for high-value behaviors beyond just purchases?",
        "This includes rewards for actions like referring friends, reaching visit milestones, or making purchases at key intervals.",
        3.6,
        "Reward customers for high-value actions like referring friends, visiting multiple times, or purchasing at key intervals.",
    ),
    _item(
        "cca4",
        QuizCategory.CUSTOMER_CENTRIC,
        "Do you offer multiple ways for customers to redeem their points and rewards?",
        "Various redemption options like discounts, exclusive products, surprise gifts, or special experiences.",
        3.6,
        "Offer multiple ways to use points, like discounts, exclusive drops, or surprise gifts. Give customers a reason to keep checking back.",
    ),
    _item(
        "cca5",
        QuizCategory.CUSTOMER_CENTRIC,
        "Can customers sign up for your program in under 30 seconds and easily track their status?",
        "Quick enrollment process with easy access to points and status through receipts, online accounts, or SMS.",
        4,
        "Make sure customers can join in seconds and easily view their points and status on receipts, online, or via SMS.",
    ),
    _item(
        "cca6",
        QuizCategory.CUSTOMER_CENTRIC,
        "Can customers easily see their point balance and available rewards without asking staff?",
        "Clear visibility of points and rewards both in-store and through digital channels.",
        3.6,
        "Display point balances and reward options clearly in-store and digitally. Lack of visibility kills engagement.",
    ),
    # Engagement & Communication
    _item(
        "ec1",
        QuizCategory.ENGAGEMENT,
        "Do you send regular updates about customer status, rewards, and promotions?",
        "Consistent messaging rhythm through SMS, email, or app notifications to keep loyalty top of mind.",
        3.6,
        "Build a rhythm of messaging, weekly SMS, monthly email, occasional surprises to keep loyalty top of mind.",
    ),
    _item(
        "ec2",
        QuizCategory.ENGAGEMENT,
        "Do you maintain a consistent and reliable communication schedule with loyalty members?",
        "Regular, predictable outreach schedule rather than sporadic or inconsistent messaging.",
        3.6,
        "Set a reliable cadence for outreach. Infrequent or inconsistent messaging causes drop-off.",
    ),
    _item(
        "ec3",
        QuizCategory.ENGAGEMENT,
        "Do your notifications include personalized details like the customer's name and point balance?",
        "Customized alerts that show individual customer information and tailored reward suggestions.",
        3.2,
        "Send alerts that include the customer's name, point balance, and personalized reward suggestions.",
    ),
    _item(
        "ec4",
        QuizCategory.ENGAGEMENT,
        "Do you create engaging content that connects your loyalty program to seasonal offers or lifestyle benefits?",
        "Content marketing that ties loyalty rewards to current promotions, staff picks, or lifestyle advantages.",
        3.2,
        "Use content that links the loyalty program to seasonal drops, staff picks, or lifestyle benefits. Give people a reason to come back.",
    ),
    # Data Utilization & Analytics
    _item(
        "dua1",
        QuizCategory.DATA_ANALYTICS,
        "Do you track which loyalty offers perform best and use that data to refine your program?",
        "Analytics system that measures offer performance and uses insights to adjust budget and strategy.",
        4,
        "Start tracking which offers perform best. Use that data to shift budget and strategy accordingly.",
    ),
    _item(
        "dua2",
        QuizCategory.DATA_ANALYTICS,
        "Do you monitor key performance indicators like return visit rate and reward redemption rate?",
        "Defined KPIs with dashboards to track metrics like customer frequency, redemption rates, and program engagement over time.",
        3.6,
        "Define KPIs like return visit rate, reward redemption rate, and frequency. Build dashboards to track over time.",
    ),
    _item(
        "dua3",
        QuizCategory.DATA_ANALYTICS,
        "Do you log and analyze loyalty program metrics on a monthly basis?",
        "Regular monthly tracking of key metrics to identify trends, catch customer churn, or spot seasonal patterns.",
        3.6,
        "Log key metrics monthly. Track trends to catch churn or spot seasonal patterns.",
    ),
    _item(
        "dua4",
        QuizCategory.DATA_ANALYTICS,
        "Do you conduct quarterly reviews to evaluate and adjust your loyalty program strategy?",
        "Scheduled quarterly assessments to determine what's working and where to modify campaigns or offers.",
        3.6,
        "Put time on the calendar every quarter to evaluate what's working and where to adjust campaigns or offers.",
    ),
    # Referrals & Social Sharing
    _item(
        "rss1",
        QuizCategory.REFERRALS,
        "Do you offer referral bonuses that reward both the referring customer and the new customer?",
        "Simple referral incentives like points or discounts for both the person making the referral and the new customer.",
        3.2,
        "Add a referral bonus. Keep it simple - points or a small discount for both sender and receiver.",
    ),
    _item(
        "rss2",
        QuizCategory.REFERRALS,
        "Do you provide easy ways for members to share your loyalty program benefits on social media?",
        "Tools, templates, or incentives that make it simple for customers to share program benefits and extend your reach.",
        2.8,
        "Give members ways to share program benefits on social. Templates or rewards for sharing help extend reach.",
    ),
    _item(
        "rss3",
        QuizCategory.REFERRALS,
        "Do you consistently promote referral opportunities across all your loyalty communications?",
        "Regular mentions of referral programs in emails, SMS, in-store signage, and other customer touchpoints.",
        2.8,
        "Mention referral opportunities in every loyalty message: email, SMS, in-store signage. Reinforcement drives action.",
    ),
    # Flexibility & Adaptability
    _item(
        "fa1",
        QuizCategory.FLEXIBILITY,
        "Is your loyalty program designed to scale with business growth and changing needs?",
        "Program structure that can adapt to more locations, traffic changes, or business expansion without hitting limits.",
        3.6,
        "Structure rewards so they can flex with more locations or changes in foot traffic. Avoid setting limits you'll later outgrow.",
    ),
    _item(
        "fa2",
        QuizCategory.FLEXIBILITY,
        "Do you regularly collect and act on customer feedback about your loyalty program?",
        "Systems for gathering customer input through surveys or staff feedback to understand what's working and what isn't.",
        3.2,
        "Run quick surveys or use budtender feedback to learn what's landing and what isn't.",
    ),
    _item(
        "fa3",
        QuizCategory.FLEXIBILITY,
        "Do you refresh your program visuals, rewards, and structure every six months?",
        "Regular updates to keep the program fresh, competitive, and aligned with current customer preferences.",
        3.2,
        "Refresh your program visuals, rewards, and point logic every six months to stay fresh and competitive.",
    ),
    # Attractive Rewards
    _item(
        "ar1",
        QuizCategory.ATTRACTIVE_REWARDS,
        "Do you offer different types of rewards that appeal to casual, regular, and frequent customers?",
        "Varied reward options that resonate with different customer segments, from occasional visitors to power shoppers.",
        3.2,
        "Create rewards that resonate with casual, mid-tier, and power shoppers. Each group needs a different hook.",
    ),
    _item(
        "ar2",
        QuizCategory.ATTRACTIVE_REWARDS,
        "Can even your least frequent customers redeem rewards without waiting months or years?",
        "Achievable reward thresholds that allow low-frequency customers to experience early wins and build loyalty.",
        3.2,
        "Ensure even low-frequency customers can redeem something without years of spend. Early wins build loyalty.",
    ),
    _item(
        "ar3",
        QuizCategory.ATTRACTIVE_REWARDS,
        "Do you offer multiple ways to earn points beyond just making purchases?",
        "Various earning opportunities like visiting milestones, writing reviews, social sharing, or completing challenges.",
        2.8,
        "Add new ways to earn (gamified visits, reviews, social shares, milestone visits), not just spend-based points.",
    ),
    # Exceptional Customer Service
    _item(
        "ecs1",
        QuizCategory.CUSTOMER_SERVICE,
        "Can your staff easily troubleshoot loyalty program issues and look up customer point balances?",
        "Well-trained staff with access to tools needed to resolve customer loyalty questions without creating friction.",
        4,
        "Make sure staff know how to troubleshoot rewards or look up point balances. Friction kills trust.",
    ),
    _item(
        "ecs2",
        QuizCategory.CUSTOMER_SERVICE,
        "Do you actively collect customer feedback about your loyalty program experience?",
        "Systems like surveys, comment boxes, or post-visit messages to gather customer input on program improvements.",
        3.6,
        "Set up short surveys, comment boxes, or post-visit messages to collect input. Customers will tell you what's missing.",
    ),
    _item(
        "ecs3",
        QuizCategory.CUSTOMER_SERVICE,
        "Do both customers and staff know exactly where to get help with loyalty program issues?",
        "Clear support channels and processes for loyalty program assistance, whether in-store, by phone, or through chat.",
        3.6,
        "Ensure both staff and customers know where to go for loyalty help: in-store, phone, or chat.",
    ),
    _item(
        "ecs4",
        QuizCategory.CUSTOMER_SERVICE,
        "Are your staff members trained to confidently explain how customers earn and use rewards?",
        "Comprehensive staff training on loyalty program details to ensure confident, accurate information sharing with customers.",
        3.6,
        "Train staff to speak confidently about how to earn and use rewards. Internal buy-in drives external adoption.",
    ),
    # Multi-Channel Accessibility
    _item(
        "mca1",
        QuizCategory.MULTI_CHANNEL,
        "Does your loyalty program work consistently whether customers shop online, on mobile, or in-store?",
        "Seamless program functionality across all shopping channels with consistent access to points and rewards.",
        2.8,
        "Your program should work whether someone shops online, on mobile, or in-store. Keep it consistent and connected.",
    ),
    _item(
        "mca2",
        QuizCategory.MULTI_CHANNEL,
        "Is your loyalty program branding and messaging consistent across all customer touchpoints?",
        "Unified loyalty voice, visuals, and value proposition across email, SMS, in-store signage, website, and mobile app.",
        3.2,
        "Your loyalty voice, visuals, and value should feel unified across email, SMS, signage, and website. Avoid disjointed experiences.",
    ),
)

# Display order of categories
CATEGORY_ORDER: tuple[QuizCategory, ...] = tuple(QuizCategory)

CATEGORY_SUMMARIES = MappingProxyType({
    QuizCategory.CUSTOMER_CENTRIC: "Measures how well your program puts customer needs and preferences at the center of reward design and experience.",
    QuizCategory.ENGAGEMENT: "Evaluates your ability to maintain regular, meaningful contact with loyalty program members.",
    QuizCategory.DATA_ANALYTICS: "Assesses how effectively you use data to track, measure, and improve your loyalty program performance.",
    QuizCategory.REFERRALS: "Reviews your program's ability to leverage word-of-mouth and social proof to acquire new customers.",
    QuizCategory.FLEXIBILITY: "Examines how well your program can evolve and adapt to changing business needs and customer feedback.",
    QuizCategory.ATTRACTIVE_REWARDS: "Analyzes whether your rewards are compelling, attainable, and appeal to different customer segments.",
    QuizCategory.CUSTOMER_SERVICE: "Measures the quality of support and training around your loyalty program experience.",
    QuizCategory.MULTI_CHANNEL: "Evaluates how consistently your program works across all customer touchpoints and channels.",
})

# Overall feedback, keyed by the minimum overall percentage for each tier
FEEDBACK_TIERS = MappingProxyType({
    FeedbackThreshold.EXCEPTIONAL: FeedbackTier(
        title="Exceptional Loyalty Program",
        feedback="You're running a world-class loyalty program that truly drives customer retention and engagement. Your program demonstrates excellence across all key areas.",
        recommendations=(
            "Continue monitoring performance",
            "Share best practices with industry peers",
            "Consider expanding successful elements",
        ),
    ),
    FeedbackThreshold.STRONG: FeedbackTier(
        title="Strong Loyalty Program",
        feedback="Your loyalty program is performing well above average with solid foundations in place. There are opportunities to fine-tune certain areas for even better results.",
        recommendations=(
            "Focus on underperforming categories",
            "Implement advanced personalization",
            "Strengthen data analytics capabilities",
        ),
    ),
    FeedbackThreshold.GOOD: FeedbackTier(
        title="Good Foundation",
        feedback="You have a solid loyalty program foundation with room for meaningful improvements. Most core elements are in place but need optimization.",
        recommendations=(
            "Prioritize customer-centric features",
            "Improve communication consistency",
            "Enhance reward variety and appeal",
        ),
    ),
    FeedbackThreshold.NEEDS_IMPROVEMENT: FeedbackTier(
        title="Needs Improvement",
        feedback="Your loyalty program has the basics but isn't reaching its full potential. Several key areas need attention to drive better customer engagement.",
        recommendations=(
            "Conduct customer feedback surveys",
            "Implement regular program reviews",
            "Focus on communication and personalization",
        ),
    ),
    FeedbackThreshold.SIGNIFICANT_GAPS: FeedbackTier(
        title="Significant Gaps",
        feedback="Your loyalty program has substantial gaps that are likely limiting its effectiveness. A comprehensive review and improvement plan is needed.",
        recommendations=(
            "Start with customer-centric improvements",
            "Establish consistent communication",
            "Implement basic analytics and tracking",
        ),
    ),
    FeedbackThreshold.OVERHAUL: FeedbackTier(
        title="Major Overhaul Needed",
        feedback="Your loyalty program requires fundamental changes to become effective. Consider rebuilding from the ground up with customer needs as the focus.",
        recommendations=(
            "Redesign program from customer perspective",
            "Establish clear value proposition",
            "Implement essential features first",
        ),
    ),
})


def validate_catalog(items: Sequence[QuizItem]) -> None:
    """
    Check catalog invariants and lookup-table coverage.

    Item-level constraints (category membership, positive weights) are
    enforced by the QuizItem model; this checks what spans items.

    Raises:
        CatalogConfigurationError: On duplicate ids or missing lookup entries
    """
    if not items:
        raise CatalogConfigurationError("Quiz catalog is empty")

    duplicates = sorted(item_id for item_id, n in Counter(i.id for i in items).items() if n > 1)
    if duplicates:
        raise CatalogConfigurationError(f"Duplicate quiz item ids: {', '.join(duplicates)}")

    missing_summaries = [c.value for c in QuizCategory if c not in CATEGORY_SUMMARIES]
    if missing_summaries:
        raise CatalogConfigurationError(
            f"Missing category summaries: {', '.join(missing_summaries)}"
        )

    missing_tiers = [str(t.value) for t in FeedbackThreshold if t not in FEEDBACK_TIERS]
    if missing_tiers:
        raise CatalogConfigurationError(f"Missing feedback tiers: {', '.join(missing_tiers)}")


def get_quiz_items() -> list[QuizItem]:
    """Return the catalog in catalog order."""
    return list(QUIZ_ITEMS)


validate_catalog(QUIZ_ITEMS)
