import unittest

from app.agent.instruction_composer import compose_instructions
from app.agent.prompts.instructions import (
    AUTOMATION_INSTRUCTION,
    BASE_INSTRUCTIONS,
    DATABASE_INSTRUCTION,
    EMAIL_INSTRUCTION,
    FILE_INSTRUCTION,
    MONITORING_INSTRUCTION,
    SCHEDULING_INSTRUCTION,
    WEB_SCRAPING_INSTRUCTION,
)


class InstructionComposerTests(unittest.TestCase):
    def test_base_sentences_only_when_nothing_applies(self):
        instructions = compose_instructions("Something that does various tasks", ())

        self.assertEqual(instructions, " ".join(BASE_INSTRUCTIONS))

    def test_tool_sentences_follow_table_order_not_discovery_order(self):
        instructions = compose_instructions(
            "Email the team whenever the website changes",
            ("email_tool", "web_scraper"),
        )

        self.assertLess(instructions.index(WEB_SCRAPING_INSTRUCTION), instructions.index(EMAIL_INSTRUCTION))
        self.assertIn("robots.txt", instructions)
        self.assertIn("professional and clear", instructions)

    def test_every_condition_appends_once_in_fixed_order(self):
        instructions = compose_instructions(
            "Monitor and automate the scheduling of scheduled jobs",
            {"file_manager", "database_tool", "email_tool", "web_scraper"},
        )

        expected = " ".join(
            [
                *BASE_INSTRUCTIONS,
                WEB_SCRAPING_INSTRUCTION,
                EMAIL_INSTRUCTION,
                DATABASE_INSTRUCTION,
                FILE_INSTRUCTION,
                MONITORING_INSTRUCTION,
                AUTOMATION_INSTRUCTION,
                SCHEDULING_INSTRUCTION,
            ]
        )
        self.assertEqual(instructions, expected)

    def test_text_conditions_are_case_insensitive(self):
        instructions = compose_instructions("AUTOMATION for SCHEDULING", ())

        self.assertIn(AUTOMATION_INSTRUCTION, instructions)
        self.assertIn(SCHEDULING_INSTRUCTION, instructions)
        self.assertNotIn(MONITORING_INSTRUCTION, instructions)

    def test_tool_conditions_ignore_description_keywords(self):
        instructions = compose_instructions("Save every file to the database", ())

        self.assertNotIn(FILE_INSTRUCTION, instructions)
        self.assertNotIn(DATABASE_INSTRUCTION, instructions)


if __name__ == "__main__":
    unittest.main()
