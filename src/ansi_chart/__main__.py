from ansi_chart.cli.main import main

main()
