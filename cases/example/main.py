import os
from hydroflow.analysis import ChannelInputs, analyze
from hydroflow.history import AnalysisHistory, export_document, save_document
from hydroflow.report import energy_curve, format_report, rating_curve
from hydroflow.utility import create_directory_if_not_exists

folder_path = os.path.join('cases', 'example', 'results')

history = AnalysisHistory()

inputs = ChannelInputs(Q=2.0, b=1.5, S0=0.001, n=0.025, y1=0.2)
result = analyze(inputs)
history.add(result)

print(format_report(result))

# Same channel, increasing discharge
for Q in [1.0, 4.0, 8.0]:
    history.add(analyze({'Q': Q, 'b': 1.5, 'S0': 0.001, 'n': 0.025, 'y1': 0.2}))

print(history.to_dataframe()[['Q', 'yn', 'yc', 'Frn', 'regime']])

create_directory_if_not_exists(folder_path)
energy_curve(result).to_csv(os.path.join(folder_path, 'energy_curve.csv'), index=False)
rating_curve(b=inputs.b, n=inputs.n, bed_slope=inputs.S0).to_csv(os.path.join(folder_path, 'rating_curve.csv'), index=False)

save_document(export_document(inputs, history), folder_path)
print('Finished.')
