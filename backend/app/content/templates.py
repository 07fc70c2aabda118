"""Hard-coded editorial templates used by the content generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from backend.app.content.base import Category

BACKGROUND_IMAGES: Tuple[str, ...] = (
    "https://images.unsplash.com/photo-1544551763-46a013bb70d5?ixlib=rb-4.0.3&auto=format&fit=crop&w=2000&h=1200&q=80",
    "https://images.unsplash.com/photo-1502680390469-be75c86b636f?ixlib=rb-4.0.3&auto=format&fit=crop&w=2000&h=1200&q=80",
    "https://images.unsplash.com/photo-1505142468610-359e7d316be0?ixlib=rb-4.0.3&auto=format&fit=crop&w=2000&h=1200&q=80",
    "https://images.unsplash.com/photo-1473116763249-2faaef81ccda?ixlib=rb-4.0.3&auto=format&fit=crop&w=2000&h=1200&q=80",
    "https://images.unsplash.com/photo-1544551763-77ef2d0cfc6c?ixlib=rb-4.0.3&auto=format&fit=crop&w=2000&h=1200&q=80",
)

TECH_TEAM = "ChillVibes Tech Team"
FINANCE_TEAM = "ChillVibes Finance Team"
JIU_JITSU_TEAM = "ChillVibes Jiu-Jitsu Team"
SURF_TEAM = "ChillVibes Surf Team"


@dataclass(frozen=True)
class EditorialTemplate:
    """Static source for one generated article."""

    slug: str
    category: Category
    title: str
    excerpt: str
    content: str
    author: str
    subcategory: str | None = None
    tags: Tuple[str, ...] = ()
    image_index: int = 0

    @property
    def image_url(self) -> str:
        return BACKGROUND_IMAGES[self.image_index % len(BACKGROUND_IMAGES)]


# Two per category; these feed every sync cycle.
DAILY_TEMPLATES: Tuple[EditorialTemplate, ...] = (
    EditorialTemplate(
        slug="web3-gaming-digital-ownership",
        category=Category.TECH,
        subcategory="blockchain",
        title="Web3 Gaming: The Future of Digital Ownership",
        excerpt="How blockchain technology is revolutionizing gaming economies and player ownership.",
        content="""
<h2>The Gaming Revolution</h2>
<p>Web3 gaming represents a fundamental shift from traditional gaming models to player-owned economies where digital assets have real value.</p>
<h3>True Digital Ownership</h3>
<p>Unlike traditional games where items are locked to platforms, Web3 games use NFTs to represent in-game assets that players truly own and can trade across games.</p>
<h3>Play-to-Earn Economics</h3>
<p>Players can now earn cryptocurrency and valuable NFTs through gameplay, creating new economic opportunities in virtual worlds.</p>
""",
        author=TECH_TEAM,
        tags=("web3", "gaming", "blockchain", "nft"),
        image_index=0,
    ),
    EditorialTemplate(
        slug="ai-powered-personal-finance",
        category=Category.TECH,
        subcategory="ai",
        title="AI-Powered Personal Finance: Your Digital Money Coach",
        excerpt="How artificial intelligence is making sophisticated financial planning accessible to everyone.",
        content="""
<h2>Smart Money Management</h2>
<p>AI is democratizing financial planning, bringing sophisticated analysis and personalized recommendations to everyday money management.</p>
<h3>Automated Insights</h3>
<p>Modern AI apps analyze spending patterns, identify savings opportunities and suggest investments based on your lifestyle and goals.</p>
<h3>Real-Time Optimization</h3>
<p>From credit score monitoring to portfolio rebalancing, AI systems work around the clock while you focus on living your best life.</p>
""",
        author=TECH_TEAM,
        tags=("ai", "fintech", "personal-finance", "automation"),
        image_index=1,
    ),
    EditorialTemplate(
        slug="travel-rewards-cards-adventure",
        category=Category.FINANCE,
        subcategory="travel-rewards",
        title="Ultimate Travel Rewards Cards for Adventure Seekers",
        excerpt="The best credit cards for earning points on surf trips, ski adventures, and lifestyle purchases.",
        content="""
<h2>Maximize Your Adventure Budget</h2>
<p>For the ChillVibes community, travel is about experiences. The right credit cards can turn everyday spending into epic adventures.</p>
<h3>Top Adventure-Focused Cards</h3>
<p><strong>Premium travel cards:</strong> 3x points on travel and dining plus travel protections that suit surf and ski trips.</p>
<h3>Point Optimization Strategies</h3>
<p>Transfer points to airline partners for international surf destinations, or redeem them for stays near world-class waves.</p>
""",
        author=FINANCE_TEAM,
        tags=("travel-rewards", "credit-cards", "points", "travel"),
        image_index=2,
    ),
    EditorialTemplate(
        slug="defi-yield-farming-digital-nomads",
        category=Category.FINANCE,
        subcategory="crypto",
        title="DeFi Yield Farming: Passive Income for Digital Nomads",
        excerpt="How decentralized finance protocols can generate passive income while you travel and pursue adventures.",
        content="""
<h2>Earning While Exploring</h2>
<p>DeFi has opened new possibilities for location-independent income, well suited to an adventure-focused lifestyle.</p>
<h3>Stablecoin Strategies</h3>
<p>Yield farming with stablecoins offers lower volatility while still generating meaningful returns.</p>
<h3>Risk Management</h3>
<p>Diversification across protocols and understanding smart contract risk are crucial for sustainable DeFi strategies.</p>
""",
        author=FINANCE_TEAM,
        tags=("defi", "cryptocurrency", "passive-income", "yield-farming"),
        image_index=3,
    ),
    EditorialTemplate(
        slug="mental-flow-states-jiu-jitsu",
        category=Category.JIU_JITSU,
        subcategory="mindset",
        title="Mental Flow States: From Jiu-Jitsu Mats to Life Success",
        excerpt="How martial arts training develops the mindset for peak performance in all areas of life.",
        content="""
<h2>The Art of Mental Resilience</h2>
<p>Jiu-Jitsu teaches more than physical technique. It builds mental frameworks that carry over to business, relationships and personal growth.</p>
<h3>Embracing Discomfort</h3>
<p>Regular training in uncomfortable positions builds tolerance for challenge and uncertainty.</p>
<h3>Ego Management</h3>
<p>Being humbled on the mats teaches beginner's mind and continuous learning.</p>
""",
        author=JIU_JITSU_TEAM,
        tags=("mindset", "flow-state", "mental-training", "performance"),
        image_index=4,
    ),
    EditorialTemplate(
        slug="jiu-jitsu-training-destinations",
        category=Category.JIU_JITSU,
        subcategory="destinations",
        title="Top Jiu-Jitsu Destinations: Training Around the World",
        excerpt="Epic academies and training camps in surf towns and mountain destinations worldwide.",
        content="""
<h2>Train Where Paradise Meets Performance</h2>
<p>Combine your passion for jiu-jitsu with incredible destinations and world-class instruction.</p>
<h3>Costa Rica</h3>
<p>Morning training sessions followed by world-class surfing.</p>
<h3>Brazil and Portugal</h3>
<p>Train at the source in Rio de Janeiro, or find Europe's growing scene next to the breaks of Ericeira.</p>
""",
        author=JIU_JITSU_TEAM,
        tags=("travel", "training-destinations", "lifestyle", "academies"),
        image_index=0,
    ),
    EditorialTemplate(
        slug="sustainable-surfing-conservation",
        category=Category.SURF,
        subcategory="conservation",
        title="Sustainable Surfing: Ocean Conservation Meets Wave Riding",
        excerpt="How the surf community is leading environmental conservation efforts while pursuing their passion.",
        content="""
<h2>Protecting Our Playground</h2>
<p>Surfers have always been ocean guardians, and today's community is pioneering new conservation efforts.</p>
<h3>Eco-Friendly Surfboard Innovation</h3>
<p>Recycled foam cores and bio-based resins are replacing traditional toxic materials.</p>
<h3>Carbon-Neutral Surf Travel</h3>
<p>Offset programs and eco-lodges reduce the footprint of surf tourism.</p>
""",
        author=SURF_TEAM,
        tags=("conservation", "sustainability", "environment", "eco-surfing"),
        image_index=1,
    ),
    EditorialTemplate(
        slug="ai-wave-forecasting",
        category=Category.SURF,
        subcategory="forecasting",
        title="AI Wave Forecasting: The Future of Surf Prediction",
        excerpt="How machine learning is revolutionizing surf forecasting accuracy and helping surfers score perfect sessions.",
        content="""
<h2>Precision Wave Prediction</h2>
<p>Machine learning is turning surf forecasting from educated guessing into a precise science.</p>
<h3>Machine Learning Models</h3>
<p>Models combine wind, swell direction, tides and bathymetry to predict wave quality.</p>
<h3>Crowd Prediction</h3>
<p>Some models even predict lineup crowds, pointing surfers to quieter alternatives.</p>
""",
        author=SURF_TEAM,
        tags=("forecasting", "ai", "wave-prediction", "technology"),
        image_index=2,
    ),
)

# Long-form pieces, three per category, used for full content population.
EVERGREEN_TEMPLATES: Tuple[EditorialTemplate, ...] = (
    EditorialTemplate(
        slug="decentralized-web-web3-and-beyond",
        category=Category.TECH,
        subcategory="blockchain",
        title="The Future of Decentralized Web: Web3 and Beyond",
        excerpt="Exploring how blockchain technology is reshaping the internet, from DeFi protocols to decentralized social networks.",
        content="""
<h2>The Dawn of Web3</h2>
<p>Web3 shifts the internet from centralized platforms to decentralized protocols that put users in control of their data and digital assets.</p>
<h3>Core Principles</h3>
<p><strong>Decentralization:</strong> applications run on distributed networks of nodes. <strong>User ownership:</strong> users hold their own assets and data.</p>
<h3>Real-World Applications</h3>
<p>DeFi protocols already settle billions in transactions while decentralized social networks keep gaining traction.</p>
""",
        author=TECH_TEAM,
        tags=("web3", "blockchain", "decentralization"),
        image_index=3,
    ),
    EditorialTemplate(
        slug="ai-driven-development-tools",
        category=Category.TECH,
        subcategory="ai",
        title="AI-Driven Development: Tools That Actually Matter",
        excerpt="A practical look at AI coding assistants, automated testing, and the tools that are genuinely changing how we build software.",
        content="""
<h2>Beyond the Hype</h2>
<p>AI tools are becoming powerful assistants that enhance developer productivity rather than replace human creativity.</p>
<h3>Code Generation and Completion</h3>
<p>Assistants now understand context and generate meaningful code blocks. The skill is knowing when to trust them.</p>
<h3>Automated Testing</h3>
<p>AI-powered testing tools suggest edge cases you might miss and propose fixes for common bugs.</p>
""",
        author=TECH_TEAM,
        tags=("ai", "developer-tools", "productivity"),
        image_index=4,
    ),
    EditorialTemplate(
        slug="building-resilient-systems",
        category=Category.TECH,
        subcategory="innovation",
        title="Building Resilient Systems: Lessons from Distributed Architecture",
        excerpt="How to design systems that gracefully handle failures, scale efficiently, and maintain reliability under pressure.",
        content="""
<h2>The Art of System Resilience</h2>
<p>Building resilient distributed systems means thinking beyond the happy path.</p>
<h3>Circuit Breakers and Graceful Degradation</h3>
<p>Stop cascading failures early and keep serving reduced functionality instead of failing completely.</p>
<h3>Observability</h3>
<p>Logging, metrics and tracing are how you learn what your system actually does in production.</p>
""",
        author=TECH_TEAM,
        tags=("architecture", "reliability", "distributed-systems"),
        image_index=0,
    ),
    EditorialTemplate(
        slug="defi-yield-farming-strategy",
        category=Category.FINANCE,
        subcategory="crypto",
        title="DeFi Yield Farming: Strategy Beyond the Hype",
        excerpt="Understanding the risks and rewards of yield farming in decentralized finance, with practical strategies for different risk profiles.",
        content="""
<h2>Yield Farming: Beyond the Marketing</h2>
<p>Yield farming rewards liquidity providers with trading fees and governance tokens, but it carries real risk.</p>
<h3>Risk Assessment</h3>
<p>Impermanent loss, smart contract bugs and volatile reward tokens can all erase returns.</p>
<h3>Strategic Approaches</h3>
<p>Stick to audited, established protocols and only commit what you can afford to lose.</p>
""",
        author=FINANCE_TEAM,
        tags=("defi", "cryptocurrency", "risk"),
        image_index=1,
    ),
    EditorialTemplate(
        slug="personal-finance-digital-age",
        category=Category.FINANCE,
        subcategory="markets",
        title="Personal Finance in the Digital Age: Beyond Traditional Banking",
        excerpt="How fintech innovations are changing personal finance management, from neobanks to investment apps to cryptocurrency integration.",
        content="""
<h2>Rethinking Personal Finance</h2>
<p>Neobanks, robo-advisors and crypto-enabled apps are reshaping how people manage money.</p>
<h3>Automated Investing</h3>
<p>Algorithmic portfolio management makes investing accessible to people who could never afford an advisor.</p>
<h3>The Balanced Approach</h3>
<p>Emergency funds, diversification and living below your means still matter, whatever the app.</p>
""",
        author=FINANCE_TEAM,
        tags=("fintech", "banking", "personal-finance"),
        image_index=2,
    ),
    EditorialTemplate(
        slug="investment-psychology",
        category=Category.FINANCE,
        subcategory="markets",
        title="Investment Psychology: Why Smart People Make Bad Financial Decisions",
        excerpt="Exploring cognitive biases that affect investment decisions and practical strategies to overcome emotional investing pitfalls.",
        content="""
<h2>The Mind of an Investor</h2>
<p>Investment psychology often decides long-term success more than market knowledge.</p>
<h3>Common Cognitive Biases</h3>
<p>Loss aversion, confirmation bias and recency bias push investors to buy high and sell low.</p>
<h3>Practical Strategies</h3>
<p>Dollar-cost averaging, scheduled rebalancing and pre-commitment remove emotion from timing decisions.</p>
""",
        author=FINANCE_TEAM,
        tags=("investing", "psychology", "behavioral-finance"),
        image_index=3,
    ),
    EditorialTemplate(
        slug="mental-game-resilience-jiu-jitsu",
        category=Category.JIU_JITSU,
        subcategory="mindset",
        title="The Mental Game: Building Resilience Through Jiu-Jitsu",
        excerpt="How the mental challenges of Brazilian Jiu-Jitsu translate to stronger resilience, better problem-solving, and emotional regulation in daily life.",
        content="""
<h2>More Than Physical Training</h2>
<p>Brazilian Jiu-Jitsu is often called physical chess because it demands strategic thinking under pressure.</p>
<h3>Problem-Solving Under Pressure</h3>
<p>Every roll is a series of problems to solve, which sharpens clear thinking under stress.</p>
<h3>Emotional Regulation</h3>
<p>Panic leads to exhaustion. Training teaches you to return to calm, controlled breathing.</p>
""",
        author=JIU_JITSU_TEAM,
        tags=("mindset", "resilience", "bjj"),
        image_index=4,
    ),
    EditorialTemplate(
        slug="home-training-routine-bjj",
        category=Category.JIU_JITSU,
        subcategory="training",
        title="Building Your Home Training Routine: BJJ Fundamentals",
        excerpt="Essential solo drills, mobility work, and strength training that complement your mat time and accelerate your Brazilian Jiu-Jitsu progress.",
        content="""
<h2>Training Beyond Class Time</h2>
<p>A structured home routine can significantly accelerate your BJJ development.</p>
<h3>Solo Movement Drills</h3>
<p>Shrimping, technical stand-ups and rolls build the movement base for escapes and transitions.</p>
<h3>Mobility and Strength</h3>
<p>Hip and shoulder mobility plus isometric core work keep you healthy and effective on the mat.</p>
""",
        author=JIU_JITSU_TEAM,
        tags=("training", "drills", "mobility"),
        image_index=0,
    ),
    EditorialTemplate(
        slug="competition-mindset-tournament-circuit",
        category=Category.JIU_JITSU,
        subcategory="competitions",
        title="Competition Mindset: Lessons from the Tournament Circuit",
        excerpt="How competitive Brazilian Jiu-Jitsu builds character, handles pressure, and develops strategic thinking both on and off the mat.",
        content="""
<h2>The Forge of Competition</h2>
<p>Testing your skills under pressure creates profound personal growth.</p>
<h3>Managing Pre-Competition Nerves</h3>
<p>Visualization, box breathing and reliance on drilled fundamentals keep you composed.</p>
<h3>Learning from Losses</h3>
<p>Every loss contains information about technique, tactics and preparation.</p>
""",
        author=JIU_JITSU_TEAM,
        tags=("competition", "mindset", "tournaments"),
        image_index=1,
    ),
    EditorialTemplate(
        slug="reading-the-ocean-wave-forecasting",
        category=Category.SURF,
        subcategory="forecasts",
        title="Reading the Ocean: A Surfer's Guide to Wave Forecasting",
        excerpt="Understanding swell direction, wind patterns, and tidal influences to predict optimal surf conditions and find uncrowded sessions.",
        content="""
<h2>The Language of Waves</h2>
<p>Great surfers are students of oceanography, meteorology and local knowledge.</p>
<h3>Understanding Swell</h3>
<p>Longer period swells produce cleaner, more powerful waves than short-period wind swell.</p>
<h3>Wind and Tide</h3>
<p>Offshore winds groom wave faces, and every break has its preferred tide.</p>
""",
        author=SURF_TEAM,
        tags=("forecasting", "swell", "tides"),
        image_index=2,
    ),
    EditorialTemplate(
        slug="surf-fitness-ocean-ready",
        category=Category.SURF,
        subcategory="fitness",
        title="Surf Fitness: Building Ocean-Ready Strength and Endurance",
        excerpt="Specific training routines that develop the functional strength, paddle endurance, and flexibility needed for peak surfing performance.",
        content="""
<h2>Training for the Ocean</h2>
<p>Surfing demands upper body endurance, core stability, explosive power and flexibility.</p>
<h3>Paddle Endurance</h3>
<p>Swimming, pull-up variations and paddleboard sessions translate directly to paddle fitness.</p>
<h3>Pop-up Power</h3>
<p>Burpees, Turkish get-ups and balance training build a fast, stable pop-up.</p>
""",
        author=SURF_TEAM,
        tags=("fitness", "training", "paddling"),
        image_index=3,
    ),
    EditorialTemplate(
        slug="sustainable-surfing-protecting-oceans",
        category=Category.SURF,
        subcategory="conservation",
        title="Sustainable Surfing: Protecting the Oceans We Love",
        excerpt="How the surf community is leading environmental conservation efforts, from local beach cleanups to supporting ocean protection policies.",
        content="""
<h2>Guardians of the Ocean</h2>
<p>Surfers see water quality changes and plastic pollution firsthand.</p>
<h3>Individual Actions</h3>
<p>Choose sustainable boards, reef-safe sunscreen and join regular beach cleanups.</p>
<h3>Systemic Change</h3>
<p>Support ocean protection policy and organizations working on water quality and access.</p>
""",
        author=SURF_TEAM,
        tags=("conservation", "environment", "advocacy"),
        image_index=4,
    ),
)
