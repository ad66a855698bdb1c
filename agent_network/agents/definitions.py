"""Agents of the research network example.

A weather assistant plus a small research team (coordinator, web search,
academic, fact checking, data analysis) and a report synthesizer. All of
them share one model, taken from settings.
"""

from textwrap import dedent

from agent_network.agents.registry import AgentRegistry
from agent_network.config import Settings, load_settings
from agent_network.models.agent_config import AgentConfig, ModelHandle
from agent_network.providers import resolve_model
from agent_network.tools import WEB_SEARCH_PREVIEW, weather_tool, web_search_preview

WEATHER_INSTRUCTIONS = dedent("""\
    You are a helpful weather assistant that provides accurate weather information.

    Your primary function is to help users get weather details for specific locations. When responding:
    - Always ask for a location if none is provided
    - If the location name isn't in English, please translate it
    - If giving a location with multiple parts (e.g. "New York, NY"), use the most relevant part (e.g. "New York")
    - Include relevant details like humidity, wind conditions, and precipitation
    - Keep responses concise but informative

    Use the weather_tool to fetch current weather data.""")

PRIMARY_RESEARCH_INSTRUCTIONS = dedent("""\
    You are the primary research coordinator. Your job is to:
    1. Analyze user queries to determine what type of research is needed
    2. Break down complex research questions into manageable sub-questions
    3. Synthesize information from specialized research agents into a coherent response
    4. Ensure all claims are properly supported by evidence
    5. Identify any gaps in the research that need further investigation

    You should maintain a neutral, objective tone and prioritize accuracy over speed.""")

WEB_SEARCH_INSTRUCTIONS = dedent("""\
    You are a web search specialist. Your job is to:
    1. Find the most relevant and up-to-date information online for a given query
    2. Evaluate the credibility of sources and prioritize reliable information
    3. Extract key facts and data points from web content
    4. Provide direct quotes and citations when appropriate
    5. Summarize findings in a clear, concise manner

    Always include source URLs when reporting information.

    Use the "web_search_preview" tool to search the web for information.""")

ACADEMIC_RESEARCH_INSTRUCTIONS = dedent("""\
    You are an academic research specialist. Your job is to:
    1. Analyze topics from an academic perspective
    2. Identify key theories, frameworks, and scholarly debates relevant to a query
    3. Provide historical context and development of ideas
    4. Cite academic sources properly
    5. Explain complex academic concepts in accessible language

    Prioritize peer-reviewed research and established academic sources.""")

FACT_CHECKING_INSTRUCTIONS = dedent("""\
    You are a fact-checking specialist. Your job is to:
    1. Verify claims made by other agents or in user queries
    2. Identify potential misinformation or unsubstantiated claims
    3. Cross-reference information across multiple reliable sources
    4. Provide corrections with supporting evidence
    5. Rate the confidence level of verified information

    Be thorough and skeptical, but fair in your assessments.""")

DATA_ANALYSIS_INSTRUCTIONS = dedent("""\
    You are a data analysis specialist. Your job is to:
    1. Interpret numerical data and statistics related to research queries
    2. Identify trends, patterns, and correlations in data
    3. Evaluate the methodology behind data collection and analysis
    4. Explain statistical concepts in accessible language
    5. Create clear summaries of data-driven findings

    Always consider sample sizes, statistical significance, and potential biases in data.""")

SYNTHESIZE_INSTRUCTIONS = dedent("""\
    You are given two different blocks of text, one about indoor activities and one about outdoor activities.
    Make this into a full report about the day and the possibilities depending on whether it rains or not.""")


def build_agents(model: ModelHandle) -> list[AgentConfig]:
    """Create the network's agents, in registration order, bound to ``model``."""
    return [
        AgentConfig(
            name="Weather Agent",
            instructions=WEATHER_INSTRUCTIONS,
            model=model,
            tools={"weather_tool": weather_tool},
        ),
        AgentConfig(
            name="Primary Research Agent",
            instructions=PRIMARY_RESEARCH_INSTRUCTIONS,
            model=model,
        ),
        AgentConfig(
            name="Web Search Agent",
            instructions=WEB_SEARCH_INSTRUCTIONS,
            model=model,
            tools={WEB_SEARCH_PREVIEW: web_search_preview()},
        ),
        AgentConfig(
            name="Academic Research Agent",
            instructions=ACADEMIC_RESEARCH_INSTRUCTIONS,
            model=model,
        ),
        AgentConfig(
            name="Fact Checking Agent",
            instructions=FACT_CHECKING_INSTRUCTIONS,
            model=model,
        ),
        AgentConfig(
            name="Data Analysis Agent",
            instructions=DATA_ANALYSIS_INSTRUCTIONS,
            model=model,
        ),
        AgentConfig(
            name="synthesizeAgent",
            instructions=SYNTHESIZE_INSTRUCTIONS,
            model=model,
        ),
    ]


def build_agent_registry(settings: Settings | None = None) -> AgentRegistry:
    """Build the registry from settings (environment if None).

    Raises:
        ConfigurationError: if settings.model is not a valid "provider:model".
    """
    settings = settings or load_settings()
    return AgentRegistry(build_agents(resolve_model(settings.model)))


agent_registry = build_agent_registry(Settings())

weather_agent = agent_registry.get("Weather Agent")
primary_research_agent = agent_registry.get("Primary Research Agent")
web_search_agent = agent_registry.get("Web Search Agent")
academic_research_agent = agent_registry.get("Academic Research Agent")
fact_checking_agent = agent_registry.get("Fact Checking Agent")
data_analysis_agent = agent_registry.get("Data Analysis Agent")
synthesize_agent = agent_registry.get("synthesizeAgent")
