CROP_CALENDAR_PROMPT = """You are an expert agricultural planner AI.

Generate a personalized crop calendar and task schedule for a farmer based on the following information:

- Crop: {crop_type}
- Planting Date: {planting_date}
- Location/Climate Context: {location}{growing_season_line}

Create a schedule outlining key agricultural tasks from planting to harvest. For each task, provide:
1.  **Task Name:** A clear name for the task (e.g., Soil Preparation, Planting, Germination Check, First Fertilization, Weed Management, Pest Scouting, Irrigation Management, Pruning (if applicable), Flowering Stage Check, Fruit Development, Ripening Check, Harvest Window, Post-Harvest Cleanup).
2.  **Description:** A brief explanation of the task's purpose.
3.  **Estimated Date Range:** When the task should typically occur relative to the planting date (e.g., "YYYY-MM-DD", "Mid-June", "Week of YYYY-MM-DD", "Approx. 30-45 days after planting", "Flowering period"). Be specific where possible, using the planting date as a reference.
4.  **Details (Optional):** Any specific instructions or things to look out for (e.g., type of fertilizer, specific pests, watering techniques).

Also include general notes relevant to growing {crop_type} in {location}.

Base the schedule on typical growth cycles for {crop_type}, adjusted for the general climate implied by {location}. If a growing season length is provided, use it to inform the harvest timing. Ensure the output is formatted as JSON according to the provided schema. Assume standard agricultural practices unless otherwise implied.
"""
